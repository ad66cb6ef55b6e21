"""
Tests for ShellService and the platform opener.

Date: 2026-10-18
"""

from __future__ import annotations

from unittest.mock import patch

from livefile.services import shell_service
from livefile.services.shell_service import ShellService
from livefile.utils.filesystem import open_location


class TestShellService:
    def test_uses_platform_opener_without_qt(self) -> None:
        with patch.object(shell_service, "_qt_application_running", return_value=False), patch.object(
            shell_service, "open_with_default_app", return_value=True
        ) as opener:
            assert ShellService().open_path("/photos/a.jpg") is True

        opener.assert_called_once_with("/photos/a.jpg")

    def test_failure_is_reported(self, caplog) -> None:
        with patch.object(shell_service, "_qt_application_running", return_value=False), patch.object(
            shell_service, "open_with_default_app", return_value=False
        ):
            assert ShellService().open_path("/photos/a.jpg") is False

        assert "Could not open" in caplog.text


class TestOpenWithDefaultApp:
    def test_linux_uses_xdg_open(self, tmp_path) -> None:
        with patch.object(open_location.platform, "system", return_value="Linux"), patch.object(
            open_location.subprocess, "Popen"
        ) as popen:
            assert open_location.open_with_default_app(str(tmp_path)) is True

        popen.assert_called_once_with(["xdg-open", str(tmp_path.resolve())])

    def test_macos_uses_open(self, tmp_path) -> None:
        with patch.object(open_location.platform, "system", return_value="Darwin"), patch.object(
            open_location.subprocess, "Popen"
        ) as popen:
            open_location.open_with_default_app(str(tmp_path))

        assert popen.call_args.args[0][0] == "open"

    def test_missing_opener_returns_false(self, tmp_path) -> None:
        with patch.object(open_location.platform, "system", return_value="Linux"), patch.object(
            open_location.subprocess, "Popen", side_effect=FileNotFoundError("xdg-open")
        ):
            assert open_location.open_with_default_app(str(tmp_path)) is False
