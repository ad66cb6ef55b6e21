"""Remote file download service.

Date: 2026-10-18

Streams a URL to a file with httpx. Used by ``File.from_url``: the resource
is stored in a local directory and the File is built from that path.
"""

from __future__ import annotations

import os
import uuid
from pathlib import PurePosixPath
from urllib.parse import unquote, urlparse

import aiofiles
import httpx

from livefile.config import DOWNLOAD_CHUNK_SIZE, DOWNLOAD_TIMEOUT
from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def filename_from_url(url: str) -> str:
    """Last path segment of ``url``, or a random name when there is none."""
    name = PurePosixPath(unquote(urlparse(url).path)).name
    return name or f"download-{uuid.uuid4().hex}"


class DownloadService:
    """Implements DownloaderProtocol."""

    def __init__(
        self,
        timeout: float = DOWNLOAD_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the download service.

        Args:
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)

        """
        self._timeout = timeout
        self._transport = transport

    async def download(self, url: str, directory: str) -> str:
        """Download ``url`` into ``directory``.

        Returns:
            Path of the downloaded file.

        Raises:
            httpx.HTTPStatusError: On a 4xx/5xx response.
            httpx.HTTPError: On transport failures.

        """
        os.makedirs(directory, exist_ok=True)
        target = os.path.join(directory, filename_from_url(url))
        logger.debug("[DownloadService] Downloading %s -> %s", url, target)

        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport, follow_redirects=True
        ) as client:
            async with client.stream("GET", url) as response:
                response.raise_for_status()
                async with aiofiles.open(target, "wb") as f:
                    async for chunk in response.aiter_bytes(DOWNLOAD_CHUNK_SIZE):
                        await f.write(chunk)

        return target
