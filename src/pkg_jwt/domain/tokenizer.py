from __future__ import annotations

from .exceptions import MalformedTokenError
from .value_objects import TokenSegments

SEGMENT_SEPARATOR = "."


def split_token(token: str) -> TokenSegments:
    """
    Split a compact token on its first two separators.

    Anything after the second separator is the signature segment, verbatim.
    """
    parts = token.split(SEGMENT_SEPARATOR, 2)
    if len(parts) != 3:
        raise MalformedTokenError(
            f"Token must have 3 segments separated by '{SEGMENT_SEPARATOR}', got {len(parts)}"
        )
    header, payload, signature = parts
    return TokenSegments(header=header, payload=payload, signature=signature)
