"""Module: logger_setup.py

Date: 2026-10-18

ConfigureLogger installs console and rotating file handlers on the root
logger according to ``livefile.config.app``. ``init_logging`` is the single
entry point applications call once at startup.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from livefile.config import (
    APP_NAME,
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_DIRECTORY,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from livefile.utils.logging.logger_factory import DevOnlyFilter


class ConfigureLogger:
    """Configures application-wide logging.

    Console gets ``LOG_CONSOLE_LEVEL`` and above without dev-only records,
    the activity file gets ``LOG_FILE_LEVEL`` and above, and the optional
    debug file gets everything.
    """

    def __init__(
        self,
        log_name: str = APP_NAME,
        log_dir: str = LOG_DIRECTORY,
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
        debug_enabled: bool = LOG_DEBUG_FILE_ENABLED,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize and configure the logger.

        Args:
            log_name: Base name for the log files
            log_dir: Directory to store log files
            console_enabled: Install the console handler
            file_enabled: Install the rotating activity file handler
            debug_enabled: Install the rotating debug file handler
            logger: Logger to configure (defaults to the root logger)

        """
        self.logger = logger or logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels

        if self.logger.handlers:
            return

        if console_enabled:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if file_enabled or debug_enabled:
            os.makedirs(log_dir, exist_ok=True)

        if file_enabled:
            self._setup_file_handler(
                os.path.join(log_dir, f"{log_name}.log"),
                getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                LOG_FILE_MAX_BYTES,
                LOG_FILE_BACKUP_COUNT,
            )

        if debug_enabled:
            self._setup_file_handler(
                os.path.join(log_dir, f"{log_name}_debug.log"),
                logging.DEBUG,
                LOG_DEBUG_FILE_MAX_BYTES,
                LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int) -> None:
        """Console handler with UTF-8 output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)

    def _setup_file_handler(
        self, path: str, level: int, max_bytes: int, backup_count: int
    ) -> None:
        file_handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(file_handler)


def init_logging(app_name: str = APP_NAME, **kwargs) -> logging.Logger:
    """Initialize logging for the application.

    Args:
        app_name: The base name for log files
        **kwargs: Forwarded to ``ConfigureLogger``

    Returns:
        logging.Logger: The configured logger

    """
    return ConfigureLogger(log_name=app_name, **kwargs).logger
