"""Module: livefile.config

Date: 2026-10-18

Configuration package for livefile.

This package organizes configuration into logical modules:
- app: Application info, logging
- files: File entity defaults, validation, dialogs, watching, downloads

All settings are re-exported from this module:
    from livefile.config import FILE_WATCH, PHOTO_MIME_TYPES
"""

from livefile.config.app import *  # noqa: F401, F403
from livefile.config.files import *  # noqa: F401, F403
