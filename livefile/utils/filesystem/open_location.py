"""Open files using platform-native tools.

Date: 2026-10-18
"""

from __future__ import annotations

import os
import platform
import subprocess
from pathlib import Path

from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def open_with_default_app(file_path: str) -> bool:
    """Open a file with the handler registered for its type.

    Args:
        file_path: Path to file or folder to open

    Returns:
        True if the opener was launched, False otherwise

    """
    path = Path(file_path).resolve()
    system = platform.system()

    try:
        if system == "Windows":
            os.startfile(str(path))  # type: ignore[attr-defined]
        elif system == "Darwin":
            subprocess.Popen(["open", str(path)])
        else:
            # Linux: xdg-open works on most DEs
            subprocess.Popen(["xdg-open", str(path)])
    except OSError:
        logger.exception("[open_with_default_app] Could not open %s", path)
        return False
    else:
        return True
