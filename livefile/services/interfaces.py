"""
Service protocol definitions for livefile.

Date: 2026-10-18

Protocol classes for every collaborator a File talks to. Using Protocols
allows structural subtyping, so tests and host applications can inject
their own implementations without inheriting from anything.

All protocols are runtime-checkable, meaning isinstance() works with them.

Usage:
    from livefile.services.interfaces import StorageDriverProtocol

    class InMemoryStorage:
        def exists(self, path: str) -> bool:
            return path in self.files
        ...

    storage: StorageDriverProtocol = InMemoryStorage()
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from livefile.models.file_metadata import FileMetadata

__all__ = [
    "DialogFilter",
    "DownloaderProtocol",
    "MetadataProviderProtocol",
    "SaveDialogProtocol",
    "ShellServiceProtocol",
    "StorageDriverProtocol",
    "WatchCallback",
    "WatchHandle",
    "WatchServiceProtocol",
]

# (filter name, extensions without dot)
DialogFilter = tuple[str, Sequence[str]]

# Called with (event type, path): "created", "modified", "moved" or "deleted"
WatchCallback = Callable[[str, str], None]


@runtime_checkable
class MetadataProviderProtocol(Protocol):
    """Protocol for metadata extraction.

    Implementations compute name, extension, size, MIME type, content hash,
    birth time and existence for a path, off the caller's flow.
    """

    async def get_metadata(self, path: str, *, include_data_url: bool = False) -> FileMetadata:
        """Resolve metadata for a path.

        Args:
            path: File path to inspect.
            include_data_url: Also encode the content as a data URL.

        Returns:
            FileMetadata describing the path. A missing file is reported
            with ``exists=False``, not an exception.
        """
        ...


@runtime_checkable
class StorageDriverProtocol(Protocol):
    """Protocol for synchronous file I/O primitives."""

    def exists(self, path: str) -> bool:
        """Check whether something exists at ``path``."""
        ...

    def unlink(self, path: str) -> None:
        """Delete the file at ``path``."""
        ...

    def write_file(self, path: str, data: bytes | str) -> None:
        """Write raw content to ``path``, replacing it."""
        ...

    def write_data_url(self, path: str, data_url: str) -> None:
        """Decode a data URL and write its content to ``path``."""
        ...

    def copy(self, source: str, destination: str) -> None:
        """Copy ``source`` to ``destination``."""
        ...


@runtime_checkable
class WatchHandle(Protocol):
    """Subscription returned by ``WatchServiceProtocol.watch``."""

    @property
    def active(self) -> bool:
        """Whether notifications are still delivered."""
        ...

    def cancel(self) -> None:
        """Stop delivering notifications. Safe to call twice."""
        ...


@runtime_checkable
class WatchServiceProtocol(Protocol):
    """Protocol for filesystem change notifications."""

    def watch(self, path: str, callback: WatchCallback) -> WatchHandle:
        """Deliver create/modify/move/delete notifications for ``path``.

        The path is taken literally (no glob patterns). Notifications are
        delivered once writes have settled.
        """
        ...


@runtime_checkable
class SaveDialogProtocol(Protocol):
    """Protocol for the native "save as" prompt."""

    def show_save_dialog(
        self, default_path: str | None, filters: Sequence[DialogFilter]
    ) -> str | None:
        """Prompt for a destination.

        Returns:
            The chosen path, or None if the user cancelled.
        """
        ...


@runtime_checkable
class ShellServiceProtocol(Protocol):
    """Protocol for the desktop shell integration."""

    def open_path(self, path: str) -> bool:
        """Open ``path`` with its default handler."""
        ...


@runtime_checkable
class DownloaderProtocol(Protocol):
    """Protocol for fetching remote files."""

    async def download(self, url: str, directory: str) -> str:
        """Download ``url`` into ``directory`` and return the local path."""
        ...
