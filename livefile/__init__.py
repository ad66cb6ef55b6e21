"""livefile package.

A local file modelled as a live, observable entity whose metadata is
loaded asynchronously and kept in sync with a filesystem watcher.
"""

from livefile.config.app import APP_VERSION
from livefile.core.file import (
    File,
    FileContext,
    FileNotAvailableError,
    FileWarning,
    InvalidFileError,
)
from livefile.models import FileMetadata, FileOptions, FileState

__version__ = APP_VERSION

__all__ = [
    "File",
    "FileContext",
    "FileMetadata",
    "FileNotAvailableError",
    "FileOptions",
    "FileState",
    "FileWarning",
    "InvalidFileError",
]
