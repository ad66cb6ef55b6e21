"""File entity package."""

from livefile.core.file.context import FileContext, get_default_context, set_default_context
from livefile.core.file.errors import FileNotAvailableError, FileWarning, InvalidFileError
from livefile.core.file.local_file import File

__all__ = [
    "File",
    "FileContext",
    "FileNotAvailableError",
    "FileWarning",
    "InvalidFileError",
    "get_default_context",
    "set_default_context",
]
