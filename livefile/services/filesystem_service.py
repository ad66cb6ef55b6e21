"""Filesystem operations service implementation.

Date: 2026-10-18

Concrete storage driver for the File entity. Every method is a blocking
primitive; I/O errors propagate to the caller unchanged.

Usage:
    from livefile.services.filesystem_service import FilesystemService

    storage = FilesystemService()
    if storage.exists("/path/to/file.txt"):
        storage.copy("/path/to/file.txt", "/backup/file.txt")
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from livefile.utils.filesystem.data_url import decode_data_url
from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class FilesystemService:
    """Storage driver backed by the local filesystem.

    Implements StorageDriverProtocol. Writes and copies create missing
    parent directories.
    """

    def exists(self, path: str) -> bool:
        """Check whether anything exists at ``path``."""
        return os.path.exists(path)

    def unlink(self, path: str) -> None:
        """Delete the file at ``path``.

        Raises:
            FileNotFoundError: If nothing exists at ``path``.

        """
        os.unlink(path)
        logger.debug("[FilesystemService] Deleted %s", path, extra={"dev_only": True})

    def write_file(self, path: str, data: bytes | str) -> None:
        """Write raw content to ``path``; text is encoded as UTF-8."""
        target = self._prepare_target(path)
        if isinstance(data, str):
            target.write_text(data, encoding="utf-8")
        else:
            target.write_bytes(data)
        logger.debug("[FilesystemService] Wrote %s", path, extra={"dev_only": True})

    def write_data_url(self, path: str, data_url: str) -> None:
        """Decode ``data_url`` and write its content to ``path``.

        Raises:
            ValueError: If ``data_url`` is malformed.

        """
        _mime_type, content = decode_data_url(data_url)
        self.write_file(path, content)

    def copy(self, source: str, destination: str) -> None:
        """Copy ``source`` to ``destination``, overwriting it."""
        self._prepare_target(destination)
        shutil.copyfile(source, destination)
        logger.debug(
            "[FilesystemService] Copied %s -> %s", source, destination, extra={"dev_only": True}
        )

    def _prepare_target(self, path: str) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        return target
