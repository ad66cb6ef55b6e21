"""
Tests for DialogService.

Date: 2026-10-18
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from livefile.config import SAVE_DIALOG_FILTERS
from livefile.services.dialog_service import DialogService, build_name_filter


class TestBuildNameFilter:
    def test_default_filters(self) -> None:
        assert build_name_filter(SAVE_DIALOG_FILTERS) == "PNG (*.png);;JPG (*.jpg);;GIF (*.gif)"

    def test_multiple_extensions(self) -> None:
        assert build_name_filter([("Images", ["jpg", "jpeg"])]) == "Images (*.jpg *.jpeg)"


class TestDialogService:
    @pytest.fixture(autouse=True)
    def qt(self):
        pytest.importorskip("PyQt5.QtWidgets")
        with patch("PyQt5.QtWidgets.QApplication") as application, patch(
            "PyQt5.QtWidgets.QFileDialog"
        ) as dialog:
            application.instance.return_value = object()
            yield dialog

    def test_returns_chosen_path(self, qt) -> None:
        qt.getSaveFileName.return_value = ("/out/photo.png", "PNG (*.png)")

        result = DialogService(title="Save photo").show_save_dialog("/in/photo.png", SAVE_DIALOG_FILTERS)

        assert result == "/out/photo.png"
        qt.getSaveFileName.assert_called_once_with(
            None, "Save photo", "/in/photo.png", "PNG (*.png);;JPG (*.jpg);;GIF (*.gif)"
        )

    def test_cancel_returns_none(self, qt) -> None:
        qt.getSaveFileName.return_value = ("", "")
        assert DialogService().show_save_dialog(None, SAVE_DIALOG_FILTERS) is None

    def test_default_path_may_be_empty(self, qt) -> None:
        qt.getSaveFileName.return_value = ("", "")

        DialogService().show_save_dialog(None, SAVE_DIALOG_FILTERS)

        assert qt.getSaveFileName.call_args.args[2] == ""
