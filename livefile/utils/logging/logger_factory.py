"""Module: logger_factory.py

Date: 2026-10-18

Logger factory with caching.
Keeps one logger per module name and lets the whole package switch level
in one call. Records flagged with ``extra={"dev_only": True}`` are hidden
from the console by ``DevOnlyFilter``.
"""

from __future__ import annotations

import logging
import threading
from typing import ClassVar

from livefile.config import SHOW_DEV_ONLY_IN_CONSOLE


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Loggers propagate to the root logger, which owns the console and
    file handlers installed by ``ConfigureLogger``.
    """

    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _lock = threading.Lock()
    _global_level: ClassVar[int | None] = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically ``__name__`` of the calling module

        Returns:
            logging.Logger: Cached logger instance

        """
        name = name or "livefile"

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)
                logger.propagate = True
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers.

        Args:
            level: Logging level (e.g., logging.DEBUG, logging.INFO)

        """
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Get list of all cached logger names."""
        return list(cls._loggers.keys())

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached loggers."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting a cached logger.

    Args:
        name: Logger name

    Returns:
        logging.Logger: Cached logger instance

    """
    return LoggerFactory.get_logger(name)


class DevOnlyFilter(logging.Filter):
    """Hide dev-only records from the console; file handlers keep them."""

    def __init__(self, show_dev_only: bool = SHOW_DEV_ONLY_IN_CONSOLE) -> None:
        super().__init__()
        self.show_dev_only = show_dev_only

    def filter(self, record: logging.LogRecord) -> bool:
        if self.show_dev_only:
            return True
        return not getattr(record, "dev_only", False)
