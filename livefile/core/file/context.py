"""
context.py

Date: 2026-10-18

FileContext bundles the collaborators a File works with. Files built
without an explicit context share the process-wide default one.
"""

from __future__ import annotations

import asyncio
import threading
from dataclasses import dataclass, field, replace

from livefile.config import DOWNLOAD_DIRECTORY
from livefile.services.dialog_service import DialogService
from livefile.services.download_service import DownloadService
from livefile.services.filesystem_service import FilesystemService
from livefile.services.interfaces import (
    DownloaderProtocol,
    MetadataProviderProtocol,
    SaveDialogProtocol,
    ShellServiceProtocol,
    StorageDriverProtocol,
    WatchServiceProtocol,
)
from livefile.services.metadata_service import MetadataService
from livefile.services.shell_service import ShellService
from livefile.services.watch_service import WatchService


@dataclass(frozen=True)
class FileContext:
    """Collaborators injected into a File.

    Attributes:
        storage: Synchronous file I/O
        metadata: Resolves metadata for a path
        watcher: Delivers change notifications
        dialog: Native save dialog
        shell: Opens files with their default handler
        downloader: Fetches remote files for ``File.from_url``
        download_directory: Where downloads are stored
        loop: Event loop that runs reloads triggered from other threads;
            when None, the loop running at construction time is used

    """

    storage: StorageDriverProtocol = field(default_factory=FilesystemService)
    metadata: MetadataProviderProtocol = field(default_factory=MetadataService)
    watcher: WatchServiceProtocol = field(default_factory=WatchService)
    dialog: SaveDialogProtocol = field(default_factory=DialogService)
    shell: ShellServiceProtocol = field(default_factory=ShellService)
    downloader: DownloaderProtocol = field(default_factory=DownloadService)
    download_directory: str = DOWNLOAD_DIRECTORY
    loop: asyncio.AbstractEventLoop | None = None

    def with_loop(self, loop: asyncio.AbstractEventLoop | None) -> FileContext:
        """Copy of this context bound to ``loop``."""
        return replace(self, loop=loop)


_default_context: FileContext | None = None
_default_context_lock = threading.Lock()


def get_default_context() -> FileContext:
    """Return the shared default context, creating it on first use."""
    global _default_context
    with _default_context_lock:
        if _default_context is None:
            _default_context = FileContext()
        return _default_context


def set_default_context(context: FileContext | None) -> None:
    """Replace the shared default context (None resets it)."""
    global _default_context
    with _default_context_lock:
        _default_context = context
