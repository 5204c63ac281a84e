# src/pkg_jwt/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class TokenSegments:
    """
    The three raw, still-encoded segments of a compact token.

    Kept verbatim so the signature is always checked against exactly the
    bytes that were transmitted, never against re-serialized JSON.
    """
    header: str
    payload: str
    signature: str

    @property
    def signing_input(self) -> str:
        return f"{self.header}.{self.payload}"

    def __str__(self) -> str:
        return f"{self.signing_input}.{self.signature}"


@dataclass(frozen=True, slots=True)
class DecodedToken:
    """
    Parsed header and payload plus the raw signature bytes.
    """
    header: Dict[str, Any]
    payload: Dict[str, Any]
    signature: bytes
    segments: TokenSegments

    @property
    def algorithm(self) -> Any:
        return self.header.get("alg")
