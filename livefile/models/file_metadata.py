"""
file_metadata.py

Date: 2026-10-18

Result of one metadata load. The metadata provider produces it from a path;
callers that already hold metadata (for example from an earlier background
job) can build one from a plain mapping and hand it to ``File.from_metadata``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from livefile.config import UNKNOWN_SIZE


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """Descriptive attributes of a file at one point in time.

    ``ext`` keeps its leading dot (".png") the way ``os.path.splitext``
    returns it; ``FileState`` strips and lower-cases it.
    """

    name: str
    ext: str
    dir: str
    mimetype: str | None = None
    size: int = UNKNOWN_SIZE
    exists: bool = False
    md5: str | None = None
    birthtime: datetime | None = None
    data_url: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FileMetadata:
        """Build metadata from a mapping.

        Accepts ``data_url`` or ``dataURL`` for the data URL. ``birthtime``
        may be a datetime or a POSIX timestamp in seconds.

        Raises:
            KeyError: If ``name``, ``ext`` or ``dir`` is missing

        """
        birthtime = data.get("birthtime")
        if isinstance(birthtime, (int, float)):
            birthtime = datetime.fromtimestamp(birthtime)

        return cls(
            name=data["name"],
            ext=data["ext"],
            dir=data["dir"],
            mimetype=data.get("mimetype"),
            size=data.get("size", UNKNOWN_SIZE),
            exists=bool(data.get("exists", False)),
            md5=data.get("md5"),
            birthtime=birthtime,
            data_url=data.get("data_url", data.get("dataURL")),
        )

    @classmethod
    def coerce(cls, metadata: FileMetadata | Mapping[str, Any]) -> FileMetadata:
        """Return ``metadata`` as a FileMetadata instance."""
        if isinstance(metadata, FileMetadata):
            return metadata
        return cls.from_dict(metadata)
