"""Logging utilities package.

Logging setup, factory, and filters.
"""

from livefile.utils.logging.logger_factory import DevOnlyFilter, get_cached_logger
from livefile.utils.logging.logger_setup import ConfigureLogger, init_logging

__all__ = [
    "ConfigureLogger",
    "DevOnlyFilter",
    "get_cached_logger",
    "init_logging",
]
