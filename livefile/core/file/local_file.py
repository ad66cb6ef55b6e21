"""
local_file.py

Date: 2026-10-18

This module defines the File class, a live handle on one local file. Its
descriptive fields (name, size, MIME type, content hash, existence...) come
from the metadata provider and are refreshed whenever the file changes on
disk. Consumers subscribe to its signals instead of polling:

    loading  - a metadata load started
    loaded   - a metadata load was applied; re-read the fields
    deleted  - the file was deleted through this handle
    written  - content was written through this handle
    copied   - the file was copied through this handle

Signals carry no payload. Operations that change the bytes on disk never
touch the fields directly: the watch notices the change and reloads.

Classes:
    File: Live, observable local file.
"""

from __future__ import annotations

import asyncio
import threading
import warnings
from collections.abc import Mapping
from concurrent.futures import Future
from datetime import datetime
from typing import Any

from livefile.config import PHOTO_MIME_TYPES, SAVE_DIALOG_FILTERS
from livefile.core.file.context import FileContext, get_default_context
from livefile.core.file.errors import FileNotAvailableError, InvalidFileError
from livefile.models.file_metadata import FileMetadata
from livefile.models.file_options import FileOptions
from livefile.models.file_state import FileState, compose_full_name
from livefile.services.interfaces import WatchHandle
from livefile.utils.events import Observable, Signal
from livefile.utils.filesystem.path_normalizer import join_path, normalize_path
from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

OptionsArg = FileOptions | Mapping[str, Any] | None


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class File(Observable):
    """Represents a local file.

    Fields are authoritative once the first load has been applied. Each
    applied load replaces the whole ``FileState`` snapshot at once.
    """

    loading = Signal()
    loaded = Signal()
    deleted = Signal()
    written = Signal()
    copied = Signal()

    def __init__(
        self,
        filepath: str | None = None,
        options: OptionsArg = None,
        context: FileContext | None = None,
    ) -> None:
        """Create a handle and run setup.

        Args:
            filepath: Path of the file; None for a handle filled later
            options: Overrides merged over the default FileOptions
            context: Collaborators; the shared default context if omitted

        """
        super().__init__()
        self.options = FileOptions().merged(options)
        self._context = context or get_default_context()
        self._loop = self._context.loop or _running_loop()
        self._state = FileState.from_path(filepath)

        self._watch_handle: WatchHandle | None = None
        self._reload_sequence = 0
        self._applied_sequence = 0
        self._state_lock = threading.Lock()
        self._background_reloads: set[asyncio.Task] = set()

        self.setup()

    def __repr__(self) -> str:
        return f"File(path='{self.path}', exists={self.exists}, size={self.size})"

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    async def from_path(
        cls, filepath: str, options: OptionsArg = None, context: FileContext | None = None
    ) -> File:
        """Open a local file and wait for its metadata."""
        file = cls(filepath, options, context)
        return await file.reload()

    @classmethod
    async def from_url(
        cls, url: str, options: OptionsArg = None, context: FileContext | None = None
    ) -> File:
        """Download a remote file into the download directory and open it."""
        context = context or get_default_context()
        logger.debug("[File] Downloading: %s", url)

        filepath = await context.downloader.download(url, context.download_directory)
        return await cls.from_path(filepath, options, context)

    @classmethod
    def from_metadata(
        cls,
        metadata: FileMetadata | Mapping[str, Any],
        options: OptionsArg = None,
        context: FileContext | None = None,
    ) -> File:
        """Build a file from metadata that is already known.

        No filesystem access and no load; only the watch is registered when
        the ``watch`` option is on.
        """
        file = cls(None, options, context)
        file.set_metadata(metadata)

        if file.options.watch:
            file.start_watching()
        return file

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def state(self) -> FileState:
        """Current immutable snapshot."""
        return self._state

    @property
    def path(self) -> str | None:
        """Normalized absolute path with forward slashes."""
        return self._state.path

    @property
    def realpath(self) -> str | None:
        """Path with the platform's separators."""
        return self._state.realpath

    @property
    def directory(self) -> str | None:
        return self._state.directory

    @property
    def name(self) -> str | None:
        """File name without extension."""
        return self._state.name

    @property
    def extension(self) -> str | None:
        """Lower-case extension without the dot."""
        return self._state.extension

    @property
    def full_name(self) -> str | None:
        return self._state.full_name

    @property
    def size(self) -> int:
        """Size in bytes; -1 when unknown or missing."""
        return self._state.size

    @property
    def exists(self) -> bool:
        return self._state.exists

    @property
    def mime_type(self) -> str | None:
        return self._state.mime_type

    @property
    def content_hash(self) -> str | None:
        """MD5 hex digest of the content."""
        return self._state.content_hash

    @property
    def created_at(self) -> datetime | None:
        return self._state.created_at

    @property
    def data_url(self) -> str | None:
        """Base64 data URL; only kept with the ``store_data_url`` option."""
        return self._state.data_url

    @property
    def url(self) -> str | None:
        """What a renderer should load: the data URL if kept, else the path."""
        return self._state.data_url or self._state.path

    @property
    def context(self) -> FileContext:
        return self._context

    # ------------------------------------------------------------------
    # Setup & watching
    # ------------------------------------------------------------------

    def setup(self) -> File:
        """Apply the construction options to the current path.

        1. Best-effort delete of an existing file (``delete_if_exists``)
        2. Background load (``async_load``)
        3. Watch registration (``watch``); never registered twice
        """
        if not self.path:
            return self

        if self.options.delete_if_exists:
            self._delete_existing()

        if self.options.async_load:
            self._spawn_reload(self.path)

        if self.options.watch:
            self.start_watching()

        return self

    @property
    def is_watching(self) -> bool:
        return self._watch_handle is not None and self._watch_handle.active

    def start_watching(self) -> File:
        """Reload whenever the file changes on disk."""
        if self.is_watching or not self.path:
            return self

        self._watch_handle = self._context.watcher.watch(self.path, self._on_file_changed)
        logger.debug("[File] Watching: %s", self.path, extra={"dev_only": True})
        return self

    def dispose(self) -> None:
        """Stop watching the file. The handle stays usable."""
        handle, self._watch_handle = self._watch_handle, None
        if handle is not None:
            handle.cancel()
            logger.debug("[File] Stopped watching: %s", self.path, extra={"dev_only": True})

    def _on_file_changed(self, event_type: str, changed_path: str) -> None:
        logger.debug(
            "[File] %s changed (%s)", changed_path, event_type, extra={"dev_only": True}
        )
        self._spawn_reload()

    def _delete_existing(self) -> None:
        try:
            self._context.storage.unlink(self.path)
        except OSError as e:
            logger.debug(
                "[File] Nothing deleted at %s: %s", self.path, e, extra={"dev_only": True}
            )
        else:
            logger.debug("[File] Deleted: %s", self.path)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    async def reload(self, filepath: str | None = None) -> File:
        """Load metadata and replace every descriptive field.

        Args:
            filepath: Load from this path instead; the handle then takes the
                new path (rename-aware reload)

        Returns:
            File: self

        Raises:
            ValueError: If there is no path to load from

        Overlapping reloads are ordered by start: a result is applied only
        if no reload started later has been applied already.
        """
        target = normalize_path(filepath) if filepath else self.path
        if not target:
            raise ValueError("File has no path to load metadata from")

        with self._state_lock:
            self._reload_sequence += 1
            sequence = self._reload_sequence

        self.loading.emit()

        metadata = await self._context.metadata.get_metadata(
            target, include_data_url=self.options.store_data_url
        )

        with self._state_lock:
            if sequence < self._applied_sequence:
                logger.debug(
                    "[File] Discarding stale load #%d of %s",
                    sequence,
                    target,
                    extra={"dev_only": True},
                )
                return self
            self._applied_sequence = sequence
            previous_path = self.path
            self._apply_metadata(metadata)

        if self.is_watching and self.path != previous_path:
            self.dispose()
            self.start_watching()

        self.loaded.emit()
        return self

    async def open(self, filepath: str | None = None) -> File:
        """Deprecated alias of ``reload``."""
        warnings.warn(
            "File.open() is deprecated, use File.reload()", DeprecationWarning, stacklevel=2
        )
        return await self.reload(filepath)

    def set_metadata(self, metadata: FileMetadata | Mapping[str, Any]) -> File:
        """Apply metadata as if a load had just completed.

        Counts as the newest load: reloads still in flight are discarded.
        """
        with self._state_lock:
            self._reload_sequence += 1
            self._applied_sequence = self._reload_sequence
            self._apply_metadata(metadata)
        return self

    def _apply_metadata(self, metadata: FileMetadata | Mapping[str, Any]) -> None:
        self._state = FileState.from_metadata(
            FileMetadata.coerce(metadata), store_data_url=self.options.store_data_url
        )
        if self._state.exists:
            logger.debug(
                "[File] Loaded: %s (%s)",
                self._state.path,
                self._state.content_hash,
                extra={"dev_only": True},
            )
        else:
            logger.debug(
                "[File] Loaded: %s (does not exist)", self._state.path, extra={"dev_only": True}
            )

    def _spawn_reload(self, filepath: str | None = None) -> None:
        """Start a reload without waiting for it.

        Runs on the handle's loop when it is running (thread-safe from
        watcher threads), otherwise on a daemon thread with its own loop.
        """
        loop = self._loop
        if loop is not None and loop.is_running():
            if _running_loop() is loop:
                task = loop.create_task(self.reload(filepath))
                self._background_reloads.add(task)
                task.add_done_callback(self._on_background_reload_done)
            else:
                future = asyncio.run_coroutine_threadsafe(self.reload(filepath), loop)
                future.add_done_callback(self._on_background_reload_done)
            return

        thread = threading.Thread(
            target=self._reload_in_thread, args=(filepath,), name="livefile-reload", daemon=True
        )
        thread.start()

    def _reload_in_thread(self, filepath: str | None) -> None:
        try:
            asyncio.run(self.reload(filepath))
        except Exception:
            logger.exception("[File] Background reload failed for %s", filepath or self.path)

    def _on_background_reload_done(self, future: asyncio.Task | Future) -> None:
        self._background_reloads.discard(future)
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error(
                "[File] Background reload failed for %s", self.path, exc_info=error
            )

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def get_path(self, extension: str) -> str:
        """Path of a sibling file with the same name and another extension."""
        if self.directory is None or self.name is None:
            raise ValueError("File has no path")
        return join_path(self.directory, compose_full_name(self.name, extension.lstrip(".")))

    def is_same_path(self, filepath: str) -> bool:
        """True if ``filepath`` points at this file's path."""
        return bool(self.path) and normalize_path(filepath) == self.path

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_as_photo(self) -> None:
        """Require an existing jpeg, png or gif.

        Raises:
            InvalidFileError: If the file is missing or not a photo

        """
        state = self._state

        if not state.exists:
            raise InvalidFileError(
                "Invalid photo.", f'"{state.path}" does not exist.', path=state.path
            )

        if state.mime_type not in PHOTO_MIME_TYPES:
            raise InvalidFileError(
                "Invalid photo.",
                f'"{state.path}" is not a valid photo. Only jpeg, png or gif.',
                path=state.path,
            )

    def validate_as(self, mime_type: str) -> None:
        """Require an existing file of ``mime_type``.

        Raises:
            InvalidFileError: If the file is missing or of another type

        """
        state = self._state

        if not state.exists:
            raise InvalidFileError(
                "Invalid file.",
                f'"{state.path}" does not exist.',
                path=state.path,
                expected_mime_type=mime_type,
            )

        if state.mime_type != mime_type:
            raise InvalidFileError(
                "Invalid file.",
                f'"{state.path}" is not a valid file. Only {mime_type}.',
                path=state.path,
                expected_mime_type=mime_type,
            )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def unlink(self) -> File:
        """Delete the file. No-op if it does not exist."""
        if not self.exists:
            return self

        self._context.storage.unlink(self.path)
        self.deleted.emit()

        logger.debug("[File] Deleted: %s", self.full_name)
        return self

    def write_data_url(self, data: str) -> File:
        """Write the content of a data URL to the file."""
        self._context.storage.write_data_url(self.path, data)
        self.written.emit()
        return self

    def write_file(self, file: File) -> File:
        """Replace the content with a copy of another file."""
        self._context.storage.copy(file.path, self.path)
        self.written.emit()
        return self

    def write(self, data: bytes | str) -> File:
        """Write raw content to the file."""
        self._context.storage.write_file(self.path, data)
        self.written.emit()
        return self

    def copy(self, destination: str) -> File:
        """Copy the file to ``destination``. No-op if it does not exist."""
        if not self.exists:
            return self

        self._context.storage.copy(self.path, destination)
        self.copied.emit()

        logger.debug("[File] Copied: %s -> %s", self.path, destination)
        return self

    def save(self, default_path: str | None = None) -> File:
        """Ask the user for a destination and copy the file there.

        Raises:
            FileNotAvailableError: If the file is gone; raised before the
                dialog is shown

        """
        if not self._on_disk():
            raise FileNotAvailableError(
                "The photo no longer exists.",
                "Could not save the photo because it has been deleted, "
                "this could be caused due to cleaning or antivirus programs.",
                path=self.path,
            )

        save_path = self._context.dialog.show_save_dialog(default_path, SAVE_DIALOG_FILTERS)
        if not save_path:
            return self

        return self.copy(save_path)

    def open_item(self) -> None:
        """Open the file with its default application.

        Raises:
            FileNotAvailableError: If the file is gone

        """
        if not self._on_disk():
            raise FileNotAvailableError(
                "The photo no longer exists.",
                "Could not open the photo because it has been deleted, "
                "this could be caused due to cleaning or antivirus programs.",
                path=self.path,
            )

        self._context.shell.open_path(self.path)

    def _on_disk(self) -> bool:
        return bool(self.path) and self._context.storage.exists(self.path)
