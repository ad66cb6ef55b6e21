"""Module: path_normalizer.py

Date: 2026-10-18

Central path normalization for livefile.

Every path a File exposes goes through these helpers so path comparison,
watch registration and joins agree on one spelling: absolute, normalized,
forward slashes.
"""

from __future__ import annotations

import os
from pathlib import PurePath

# Windows extended-length prefix; such paths must keep their backslashes
_EXTENDED_LENGTH_PREFIX = "\\\\?\\"


def to_slash(file_path: str | os.PathLike[str]) -> str:
    """Convert path separators to forward slashes.

    Args:
        file_path: Path in any separator form

    Returns:
        str: Same path with ``/`` separators

    Example:
        >>> to_slash("C:\\\\photos\\\\a.jpg")
        'C:/photos/a.jpg'

    """
    path = os.fspath(file_path)
    if path.startswith(_EXTENDED_LENGTH_PREFIX):
        return path
    return path.replace("\\", "/")


def normalize_path(file_path: str | os.PathLike[str] | None) -> str:
    """Return the normalized absolute path with forward slashes.

    Does not resolve symlinks and never touches the file itself.

    Args:
        file_path: The file path to normalize

    Returns:
        str: Normalized absolute path, or "" for an empty path

    """
    if not file_path:
        return ""
    return to_slash(os.path.abspath(os.fspath(file_path)))


def join_path(directory: str, file_name: str) -> str:
    """Join a directory and a file name into a normalized slash path."""
    return to_slash(os.path.normpath(os.path.join(directory, file_name)))


def native_path(file_path: str) -> str:
    """Return ``file_path`` using the platform's own separators."""
    return str(PurePath(os.path.normpath(file_path)))


def is_same_path(first: str | os.PathLike[str], second: str | os.PathLike[str]) -> bool:
    """Compare two paths after normalization."""
    return normalize_path(first) == normalize_path(second)
