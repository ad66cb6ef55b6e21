"""Native save dialog service.

Date: 2026-10-18

Save-as prompt built on PyQt5's QFileDialog. PyQt5 is imported when the
dialog is first shown so headless code paths never load Qt.
"""

from __future__ import annotations

from collections.abc import Sequence

from livefile.config import SAVE_DIALOG_TITLE
from livefile.services.interfaces import DialogFilter
from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def build_name_filter(filters: Sequence[DialogFilter]) -> str:
    """Convert (name, extensions) pairs to a Qt name filter string.

    Example:
        >>> build_name_filter([("PNG", ["png"]), ("JPG", ["jpg", "jpeg"])])
        'PNG (*.png);;JPG (*.jpg *.jpeg)'

    """
    return ";;".join(
        f"{name} ({' '.join(f'*.{ext}' for ext in extensions)})" for name, extensions in filters
    )


class DialogService:
    """Save dialog backed by QFileDialog.

    Implements SaveDialogProtocol.
    """

    def __init__(self, parent=None, title: str = SAVE_DIALOG_TITLE) -> None:
        """Initialize the dialog service.

        Args:
            parent: Optional parent QWidget for the dialog
            title: Window title of the dialog

        """
        self._parent = parent
        self._title = title

    def show_save_dialog(
        self, default_path: str | None, filters: Sequence[DialogFilter]
    ) -> str | None:
        """Show a modal save dialog.

        Returns:
            The chosen path, or None if the user cancelled.

        """
        from PyQt5.QtWidgets import QApplication, QFileDialog

        # QFileDialog needs an application object
        if QApplication.instance() is None:
            logger.debug("[DialogService] Creating QApplication", extra={"dev_only": True})
            self._app = QApplication([])

        save_path, _selected_filter = QFileDialog.getSaveFileName(
            self._parent,
            self._title,
            default_path or "",
            build_name_filter(filters),
        )
        if not save_path:
            logger.debug("[DialogService] Save dialog cancelled", extra={"dev_only": True})
            return None
        return save_path
