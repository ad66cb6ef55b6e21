"""Module: livefile.config.files

Date: 2026-10-18

File entity configuration: option defaults, validation, save dialog
filters, watching and downloads.
"""

import tempfile

# =====================================
# FILE OPTION DEFAULTS
# =====================================

# Delete any existing file at the path during setup (best-effort)
FILE_DELETE_IF_EXISTS = False

# Trigger a metadata load during setup without awaiting it
FILE_ASYNC_LOAD = False

# Keep a base64 data URL of the content in memory after each load
FILE_STORE_DATA_URL = False

# Register a filesystem watch during setup
FILE_WATCH = True

# =====================================
# VALIDATION
# =====================================

PHOTO_MIME_TYPES = ("image/jpeg", "image/png", "image/gif")

# =====================================
# SAVE DIALOG
# =====================================

SAVE_DIALOG_TITLE = "Save as"

# (filter name, extensions)
SAVE_DIALOG_FILTERS = (
    ("PNG", ("png",)),
    ("JPG", ("jpg",)),
    ("GIF", ("gif",)),
)

# =====================================
# METADATA
# =====================================

CONTENT_HASH_ALGORITHM = "md5"
METADATA_MAX_WORKERS = 2

# Sentinel size for files that do not exist or were never loaded
UNKNOWN_SIZE = -1

# =====================================
# WATCHING
# =====================================

# Seconds without new events before a change is reported
WATCH_WRITE_SETTLE_DELAY = 0.5

# =====================================
# DOWNLOADS
# =====================================

DOWNLOAD_DIRECTORY = tempfile.gettempdir()
DOWNLOAD_TIMEOUT = 60.0  # seconds
DOWNLOAD_CHUNK_SIZE = 64 * 1024
