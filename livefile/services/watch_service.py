"""Module: watch_service.py

Date: 2026-10-18

Filesystem watch service built on the watchdog library.

Features:
- Literal paths only (no glob patterns)
- One observer schedule per directory, shared by every subscription in it
- Missing parents: the nearest existing ancestor is watched recursively,
  so a file can be watched before its folder is created
- Per-subscription debounce: a notification is delivered once no new event
  arrived for ``settle_delay`` seconds, so half-written files are not read
- Explicit cancel; the schedule is removed with its last subscription
"""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from livefile.config import WATCH_WRITE_SETTLE_DELAY
from livefile.services.interfaces import WatchCallback
from livefile.utils.filesystem.path_normalizer import normalize_path
from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_WatchKey = tuple[str, bool]  # (directory, recursive)


class WatchSubscription:
    """Debounced delivery of change notifications for one path.

    Returned by ``WatchService.watch``; implements the WatchHandle protocol.
    """

    def __init__(
        self,
        service: WatchService,
        key: _WatchKey,
        target: str,
        callback: WatchCallback,
        settle_delay: float,
    ) -> None:
        self.target = target
        self._service = service
        self._key = key
        self._callback = callback
        self._settle_delay = settle_delay
        self._timer: threading.Timer | None = None
        self._pending: tuple[str, str] | None = None
        self._lock = threading.Lock()
        self._active = True

    def __repr__(self) -> str:
        return f"WatchSubscription(target='{self.target}', active={self._active})"

    @property
    def active(self) -> bool:
        return self._active

    def matches(self, changed_path: str) -> bool:
        """True when a change at ``changed_path`` concerns the target.

        Covers the target itself, anything inside it (directory targets) and
        any of its parents (a parent folder deleted or renamed).
        """
        return (
            changed_path == self.target
            or changed_path.startswith(self.target + "/")
            or self.target.startswith(changed_path + "/")
        )

    def notify(self, event_type: str, changed_path: str) -> None:
        """Record an event and restart the settle timer."""
        with self._lock:
            if not self._active:
                return
            self._pending = (event_type, changed_path)
            if self._timer:
                self._timer.cancel()
            self._timer = threading.Timer(self._settle_delay, self._deliver)
            self._timer.daemon = True
            self._timer.start()

    def _deliver(self) -> None:
        with self._lock:
            if not self._active or self._pending is None:
                return
            event_type, changed_path = self._pending
            self._pending = None
            self._timer = None

        logger.debug(
            "[WatchService] %s: %s", event_type, changed_path, extra={"dev_only": True}
        )
        try:
            self._callback(event_type, changed_path)
        except Exception:
            logger.exception("[WatchService] Watch callback failed for %s", self.target)

    def cancel(self) -> None:
        """Stop delivering notifications. Safe to call twice."""
        with self._lock:
            if not self._active:
                return
            self._active = False
            if self._timer:
                self._timer.cancel()
                self._timer = None
            self._pending = None
        self._service._unsubscribe(self._key, self)


class _DirectoryEventHandler(FileSystemEventHandler):
    """Forwards content events of one scheduled directory to the service.

    Open/close events are ignored: reading a file to refresh its metadata
    must not count as a change.
    """

    def __init__(self, service: WatchService, key: _WatchKey) -> None:
        super().__init__()
        self._service = service
        self._key = key

    def on_created(self, event: FileSystemEvent) -> None:
        self._service._dispatch(self._key, "created", event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        # Directory mtime changes when entries are added; the entry event covers it
        if not event.is_directory:
            self._service._dispatch(self._key, "modified", event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._service._dispatch(self._key, "deleted", event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._service._dispatch(self._key, "moved", event.src_path)
        dest_path = getattr(event, "dest_path", None)
        if dest_path:
            self._service._dispatch(self._key, "moved", dest_path)


@dataclass
class _ScheduledDirectory:
    handle: Any
    subscriptions: list[WatchSubscription] = field(default_factory=list)


class WatchService:
    """Watch individual paths for changes.

    Implements WatchServiceProtocol. The watchdog observer thread starts
    with the first subscription; ``stop()`` ends it and cancels everything.
    """

    def __init__(
        self,
        settle_delay: float = WATCH_WRITE_SETTLE_DELAY,
        observer_factory: Callable[[], Any] = Observer,
    ) -> None:
        """Initialize the watch service.

        Args:
            settle_delay: Quiet period in seconds before a change is reported
            observer_factory: Builds the watchdog observer

        """
        self._settle_delay = settle_delay
        self._observer_factory = observer_factory
        self._observer: Any = None
        self._scheduled: dict[_WatchKey, _ScheduledDirectory] = {}
        self._lock = threading.RLock()

    def watch(self, path: str, callback: WatchCallback) -> WatchSubscription:
        """Subscribe to changes of ``path``.

        Args:
            path: File or directory path, taken literally
            callback: Called with (event type, changed path) from a timer thread

        Returns:
            WatchSubscription: Handle whose ``cancel()`` ends the subscription

        Raises:
            OSError: If the observer cannot watch the resolved directory

        """
        target = normalize_path(path)
        key = self._resolve_watch_root(target)

        with self._lock:
            scheduled = self._scheduled.get(key)
            if scheduled is None:
                directory, recursive = key
                handler = _DirectoryEventHandler(self, key)
                handle = self._ensure_observer().schedule(handler, directory, recursive=recursive)
                scheduled = self._scheduled[key] = _ScheduledDirectory(handle)
                logger.debug(
                    "[WatchService] Now watching: %s (recursive=%s)",
                    directory,
                    recursive,
                    extra={"dev_only": True},
                )

            subscription = WatchSubscription(self, key, target, callback, self._settle_delay)
            scheduled.subscriptions.append(subscription)

        return subscription

    def stop(self) -> None:
        """Cancel every subscription and stop the observer thread."""
        with self._lock:
            subscriptions = [
                sub for scheduled in self._scheduled.values() for sub in scheduled.subscriptions
            ]
        for subscription in subscriptions:
            subscription.cancel()

        with self._lock:
            observer, self._observer = self._observer, None

        if observer is not None and observer.is_alive():
            observer.stop()
            observer.join(timeout=2)
        logger.debug("[WatchService] Stopped", extra={"dev_only": True})

    def get_watched_directories(self) -> list[str]:
        """Directories currently scheduled on the observer."""
        with self._lock:
            return sorted(directory for directory, _recursive in self._scheduled)

    def _ensure_observer(self) -> Any:
        if self._observer is None:
            self._observer = self._observer_factory()
            self._observer.daemon = True
            self._observer.start()
        return self._observer

    def _resolve_watch_root(self, target: str) -> _WatchKey:
        """Pick the directory to schedule for ``target``."""
        if os.path.isdir(target):
            return target, True

        parent = os.path.dirname(target)
        directory = parent
        while not os.path.isdir(directory) and os.path.dirname(directory) != directory:
            directory = os.path.dirname(directory)
        return directory, directory != parent

    def _dispatch(self, key: _WatchKey, event_type: str, raw_path: str | bytes) -> None:
        changed_path = normalize_path(os.fsdecode(raw_path))
        with self._lock:
            scheduled = self._scheduled.get(key)
            subscriptions = list(scheduled.subscriptions) if scheduled else []

        for subscription in subscriptions:
            if subscription.matches(changed_path):
                subscription.notify(event_type, changed_path)

    def _unsubscribe(self, key: _WatchKey, subscription: WatchSubscription) -> None:
        with self._lock:
            scheduled = self._scheduled.get(key)
            if scheduled is None or subscription not in scheduled.subscriptions:
                return
            scheduled.subscriptions.remove(subscription)
            if scheduled.subscriptions:
                return

            del self._scheduled[key]
            if self._observer is not None:
                try:
                    self._observer.unschedule(scheduled.handle)
                except KeyError:
                    logger.debug(
                        "[WatchService] Schedule already removed: %s",
                        key[0],
                        extra={"dev_only": True},
                    )
            logger.debug(
                "[WatchService] Stopped watching: %s", key[0], extra={"dev_only": True}
            )
