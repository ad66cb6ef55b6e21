"""Desktop shell integration service.

Date: 2026-10-18

Opens files with their default handler. Uses QDesktopServices when a Qt
application is running and the platform opener otherwise.
"""

from __future__ import annotations

from livefile.utils.filesystem.open_location import open_with_default_app
from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _qt_application_running() -> bool:
    try:
        from PyQt5.QtWidgets import QApplication
    except ImportError:
        return False
    return QApplication.instance() is not None


class ShellService:
    """Implements ShellServiceProtocol."""

    def open_path(self, path: str) -> bool:
        """Open ``path`` with its default handler. Fire-and-forget.

        Returns:
            True if the open request was handed to the desktop.

        """
        if _qt_application_running():
            from PyQt5.QtCore import QUrl
            from PyQt5.QtGui import QDesktopServices

            opened = QDesktopServices.openUrl(QUrl.fromLocalFile(path))
        else:
            opened = open_with_default_app(path)

        if not opened:
            logger.warning("[ShellService] Could not open %s", path)
        return bool(opened)
