"""Module: data_url.py

Date: 2026-10-18

Encoding and decoding of ``data:`` URLs (RFC 2397).
"""

from __future__ import annotations

import base64
import binascii
from urllib.parse import unquote_to_bytes

DEFAULT_MIME_TYPE = "application/octet-stream"


def encode_data_url(content: bytes, mime_type: str | None = None) -> str:
    """Encode bytes as a base64 data URL.

    Args:
        content: Raw content
        mime_type: Media type of the content

    Returns:
        str: ``data:<mime>;base64,<payload>``

    """
    payload = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type or DEFAULT_MIME_TYPE};base64,{payload}"


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Decode a data URL.

    Args:
        data_url: A ``data:`` URL, base64 or percent-encoded

    Returns:
        tuple: (media type, decoded content)

    Raises:
        ValueError: If the string is not a well-formed data URL

    """
    if not data_url.startswith("data:"):
        raise ValueError("Not a data URL: missing 'data:' scheme")

    header, separator, payload = data_url[len("data:") :].partition(",")
    if not separator:
        raise ValueError("Not a data URL: missing ',' separator")

    params = header.split(";")
    is_base64 = params[-1].strip().lower() == "base64"
    if is_base64:
        params = params[:-1]
    mime_type = params[0].strip() if params and params[0].strip() else "text/plain"

    if not is_base64:
        return mime_type, unquote_to_bytes(payload)

    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload in data URL: {e}") from e
