"""
file_state.py

Date: 2026-10-18

Immutable snapshot of everything a File knows about its file. A File holds
exactly one FileState; every applied load builds a new one and swaps the
reference, so readers never see a half-applied update.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime

from livefile.config import UNKNOWN_SIZE
from livefile.models.file_metadata import FileMetadata
from livefile.utils.filesystem.path_normalizer import (
    join_path,
    native_path,
    normalize_path,
    to_slash,
)

__all__ = ["FileState", "compose_full_name"]


def compose_full_name(name: str, extension: str) -> str:
    """Join name and extension; files without an extension keep the bare name."""
    return f"{name}.{extension}" if extension else name


def _strip_dot(ext: str) -> str:
    return ext[1:] if ext.startswith(".") else ext


@dataclass(frozen=True, slots=True)
class FileState:
    """Snapshot of a file's identity and descriptive fields."""

    path: str | None = None
    directory: str | None = None
    name: str | None = None
    extension: str | None = None
    full_name: str | None = None
    size: int = UNKNOWN_SIZE
    exists: bool = False
    mime_type: str | None = None
    content_hash: str | None = None
    created_at: datetime | None = None
    data_url: str | None = None

    @property
    def realpath(self) -> str | None:
        """Path with the platform's native separators."""
        return native_path(self.path) if self.path else None

    @classmethod
    def from_path(cls, file_path: str | os.PathLike[str] | None) -> FileState:
        """Decompose a path into an unloaded state. No filesystem access."""
        path = normalize_path(file_path)
        if not path:
            return cls()

        directory, base_name = os.path.split(path)
        name, ext = os.path.splitext(base_name)
        extension = _strip_dot(ext).lower()
        full_name = compose_full_name(name, extension)
        return cls(
            path=join_path(directory, full_name),
            directory=directory,
            name=name,
            extension=extension,
            full_name=full_name,
        )

    @classmethod
    def from_metadata(cls, metadata: FileMetadata, store_data_url: bool = False) -> FileState:
        """Build the state a completed load describes.

        Args:
            metadata: Result of the load
            store_data_url: Keep the data URL; otherwise it is dropped

        """
        # full_name and path are always name + "." + lower-case extension
        extension = _strip_dot(metadata.ext).lower()
        full_name = compose_full_name(metadata.name, extension)
        directory = to_slash(metadata.dir)
        exists = bool(metadata.exists)

        return cls(
            path=join_path(directory, full_name),
            directory=directory,
            name=metadata.name,
            extension=extension,
            full_name=full_name,
            size=metadata.size if exists else UNKNOWN_SIZE,
            exists=exists,
            mime_type=metadata.mimetype,
            content_hash=metadata.md5,
            created_at=metadata.birthtime,
            data_url=metadata.data_url if store_data_url else None,
        )
