"""
errors.py

Date: 2026-10-18

User-facing errors raised by File. Each carries a short title for a dialog
heading and a longer message that names the file.
"""

from __future__ import annotations


class FileWarning(Exception):
    """Base class for user-facing file errors."""

    def __init__(self, title: str, message: str, path: str | None = None) -> None:
        super().__init__(f"{title} {message}")
        self.title = title
        self.message = message
        self.path = path


class InvalidFileError(FileWarning):
    """The file is missing or not of the expected type."""

    def __init__(
        self,
        title: str,
        message: str,
        path: str | None = None,
        expected_mime_type: str | None = None,
    ) -> None:
        super().__init__(title, message, path)
        self.expected_mime_type = expected_mime_type


class FileNotAvailableError(InvalidFileError):
    """The file disappeared from disk before an action could use it."""
