"""Event system.

Pure Python signals used by the File entity to publish lifecycle events.
"""

from livefile.utils.events.observable import Observable, Signal, SignalInstance

__all__ = ["Observable", "Signal", "SignalInstance"]
