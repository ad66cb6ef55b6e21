"""
file_options.py

Date: 2026-10-18

Construction options of a File, merged over the defaults in
``livefile.config.files``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from livefile.config import (
    FILE_ASYNC_LOAD,
    FILE_DELETE_IF_EXISTS,
    FILE_STORE_DATA_URL,
    FILE_WATCH,
)


@dataclass(frozen=True, slots=True)
class FileOptions:
    """Options recognized by ``File``.

    Attributes:
        delete_if_exists: Delete any file already at the path during setup
        async_load: Start a metadata load during setup without awaiting it
        store_data_url: Keep a base64 data URL of the content after loads
        watch: Reload whenever the file changes on disk

    """

    delete_if_exists: bool = FILE_DELETE_IF_EXISTS
    async_load: bool = FILE_ASYNC_LOAD
    store_data_url: bool = FILE_STORE_DATA_URL
    watch: bool = FILE_WATCH

    def merged(self, overrides: FileOptions | Mapping[str, Any] | None = None) -> FileOptions:
        """Return a copy with ``overrides`` applied.

        Raises:
            ValueError: If a mapping names an unknown option
            TypeError: If an option value is not a bool

        """
        if overrides is None:
            return self
        if isinstance(overrides, FileOptions):
            return overrides

        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown file option(s): {', '.join(sorted(unknown))}")

        for key, value in overrides.items():
            if not isinstance(value, bool):
                raise TypeError(
                    f"File option '{key}' must be a bool, got {type(value).__name__}"
                )
        return replace(self, **overrides)
