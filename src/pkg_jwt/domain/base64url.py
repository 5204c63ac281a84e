"""
URL-safe, unpadded base64 as used by every token segment.
"""

from __future__ import annotations

import base64
import binascii

from .exceptions import InvalidEncodingError


def b64url_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").replace("+", "-").replace("/", "_").rstrip("=")


def b64url_decode(data: str | bytes) -> bytes:
    """
    Reverse of `b64url_encode`.

    Padding is restored to the next multiple of four before decoding.
    Raises InvalidEncodingError on characters outside the alphabet or on a
    length no padding can fix.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError("Segment is not ASCII") from exc
    if not isinstance(data, str):
        raise InvalidEncodingError(f"Cannot base64url-decode {type(data).__name__}")

    data = data.replace("-", "+").replace("_", "/")
    data += "=" * ((4 - len(data) % 4) % 4)

    try:
        return base64.b64decode(data.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as exc:
        raise InvalidEncodingError(f"Invalid base64url segment: {exc}") from exc
