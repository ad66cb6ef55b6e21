"""Services package.

Protocol interfaces for the collaborators of a File and their default
implementations.
"""

from livefile.services.interfaces import (
    DownloaderProtocol,
    MetadataProviderProtocol,
    SaveDialogProtocol,
    ShellServiceProtocol,
    StorageDriverProtocol,
    WatchHandle,
    WatchServiceProtocol,
)

__all__ = [
    "DownloaderProtocol",
    "MetadataProviderProtocol",
    "SaveDialogProtocol",
    "ShellServiceProtocol",
    "StorageDriverProtocol",
    "WatchHandle",
    "WatchServiceProtocol",
]
