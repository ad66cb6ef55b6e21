"""Metadata provider implementation.

Date: 2026-10-18

Resolves everything a File shows about itself (name, extension, directory,
MIME type, size, existence, content hash, birth time and optionally a data
URL) for one path. Stat calls and hashing run in a thread pool so the
event loop stays responsive while large files are digested; the data URL
is read with aiofiles.

Usage:
    from livefile.services.metadata_service import MetadataService

    service = MetadataService()
    metadata = await service.get_metadata("/photos/a.jpg")
"""

from __future__ import annotations

import asyncio
import mimetypes
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import aiofiles

from livefile.config import METADATA_MAX_WORKERS, UNKNOWN_SIZE
from livefile.models.file_metadata import FileMetadata
from livefile.services.hash_service import HashService
from livefile.utils.filesystem.data_url import encode_data_url
from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class MetadataService:
    """Metadata provider backed by the local filesystem.

    Implements MetadataProviderProtocol.
    """

    def __init__(
        self,
        hash_service: HashService | None = None,
        executor: ThreadPoolExecutor | None = None,
        max_workers: int = METADATA_MAX_WORKERS,
    ) -> None:
        """Initialize the metadata service.

        Args:
            hash_service: Service computing the content digest.
            executor: Executor for blocking work; one is created if omitted.
            max_workers: Worker count of the created executor.

        """
        self._hash_service = hash_service or HashService()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="livefile-metadata"
        )

    async def get_metadata(self, path: str, *, include_data_url: bool = False) -> FileMetadata:
        """Resolve metadata for ``path`` without blocking the event loop.

        Args:
            path: File path to inspect.
            include_data_url: Also read the content into a data URL.

        Returns:
            FileMetadata for the path.

        Raises:
            OSError: If the path exists but cannot be inspected.

        """
        loop = asyncio.get_running_loop()
        metadata = await loop.run_in_executor(self._executor, self.collect, path)

        if include_data_url and metadata.exists and metadata.md5 is not None:
            metadata = replace(metadata, data_url=await self._read_data_url(path, metadata.mimetype))

        return metadata

    def collect(self, path: str) -> FileMetadata:
        """Blocking part of the lookup: split, stat and hash."""
        absolute = os.path.abspath(path)
        directory, full_name = os.path.split(absolute)
        name, ext = os.path.splitext(full_name)

        try:
            stat = os.stat(absolute)
        except (FileNotFoundError, NotADirectoryError):
            logger.debug(
                "[MetadataService] %s does not exist", absolute, extra={"dev_only": True}
            )
            return FileMetadata(name=name, ext=ext, dir=directory, size=UNKNOWN_SIZE, exists=False)

        mimetype, _ = mimetypes.guess_type(full_name, strict=False)
        birthtime = getattr(stat, "st_birthtime", stat.st_ctime)

        metadata = FileMetadata(
            name=name,
            ext=ext,
            dir=directory,
            mimetype=mimetype,
            size=stat.st_size,
            exists=True,
            md5=self._hash_service.compute_hash(Path(absolute)),
            birthtime=datetime.fromtimestamp(birthtime),
        )
        logger.debug(
            "[MetadataService] Loaded %s (%s, %d bytes)",
            absolute,
            metadata.md5,
            metadata.size,
            extra={"dev_only": True},
        )
        return metadata

    async def _read_data_url(self, path: str, mimetype: str | None) -> str:
        async with aiofiles.open(path, "rb") as f:
            content = await f.read()
        return encode_data_url(content, mimetype)

    def shutdown(self) -> None:
        """Release the executor if this service created it."""
        if self._owns_executor:
            self._executor.shutdown(wait=False)
