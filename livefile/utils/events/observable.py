"""Module: observable.py

Date: 2026-10-18

Observable - pure Python observer pattern.

- Signal descriptor for declaring events on a class
- Per-instance SignalInstance with connect/disconnect/emit
- Synchronous, thread-safe delivery in connection order
- A failing callback is logged and does not stop delivery to the others
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


class Signal:
    """Descriptor for defining observable signals.

    Usage:
        class Document(Observable):
            saved = Signal()

        doc = Document()
        doc.saved.connect(callback)
        doc.saved.emit()
    """

    def __init__(self, *arg_types: type) -> None:
        """Initialize signal with expected argument types.

        Args:
            *arg_types: Type hints for signal arguments (documentation only)

        """
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, _objtype: type | None = None) -> Any:
        if obj is None:
            return self

        instances = obj.__dict__.setdefault("_signal_instances", {})
        signal_instance = instances.get(self.name)
        if signal_instance is None:
            signal_instance = instances[self.name] = SignalInstance(self.name, self.arg_types)
        return signal_instance


class SignalInstance:
    """Instance of a signal bound to one object."""

    def __init__(self, name: str, arg_types: tuple[type, ...] = ()) -> None:
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._callbacks)

    def connect(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Connect callback to signal.

        Connecting the same callback twice is a no-op. Returns the callback
        so the method can be used as a decorator.

        Args:
            callback: Function to call when the signal is emitted

        """
        with self._lock:
            if callback not in self._callbacks:
                self._callbacks.append(callback)
                logger.debug(
                    "Signal connected: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                    extra={"dev_only": True},
                )
        return callback

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect callback from signal.

        Args:
            callback: Callback to remove. If None, removes all callbacks.

        """
        with self._lock:
            if callback is None:
                self._callbacks.clear()
            elif callback in self._callbacks:
                self._callbacks.remove(callback)

    def emit(self, *args: Any) -> None:
        """Emit signal, calling every connected callback with ``args``."""
        with self._lock:
            callbacks = self._callbacks.copy()

        # Call outside lock so callbacks may connect/disconnect
        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                )


class Observable:
    """Base class for objects with observable signals.

        class Counter(Observable):
            changed = Signal()
    """

    def signals(self) -> dict[str, SignalInstance]:
        """Return every signal declared on the class, bound to this object."""
        return {
            name: getattr(self, name)
            for klass in type(self).__mro__
            for name, attr in vars(klass).items()
            if isinstance(attr, Signal)
        }
