"""Data models for the File entity."""

from livefile.models.file_metadata import FileMetadata
from livefile.models.file_options import FileOptions
from livefile.models.file_state import FileState

__all__ = ["FileMetadata", "FileOptions", "FileState"]
