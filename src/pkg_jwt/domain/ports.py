from __future__ import annotations

from typing import Protocol, Mapping, Any


KeyMaterial = str | bytes


class SigningAlgorithm(Protocol):
    """
    Capability shared by every registered algorithm family.

    Implementations live in the adapters layer (HMAC, RSA).
    """

    def sign(self, data: bytes, key: KeyMaterial) -> bytes:
        """
        Sign `data` with `key` and return the raw signature bytes.

        Raises:
          - InvalidKeyError if `key` cannot be used for signing
        """
        ...

    def verify(self, data: bytes, signature: bytes, key: KeyMaterial) -> bool:
        """
        Return True when `signature` matches `data` under `key`.

        A mismatch is reported as False, never as an exception.
        Raises:
          - InvalidKeyError if `key` cannot be used for verification
        """
        ...


class Clock(Protocol):
    def __call__(self) -> float:
        """Current Unix time in seconds."""
        ...


class TokenDecoder(Protocol):
    """
    Port for decoding a token into claims.

    Integrations (FastAPI, CLI) depend on this, not on a concrete codec.
    """

    def decode(self, token: str) -> Mapping[str, Any]:
        """
        Decode and verify the given token.

        Should:
          - verify signature
          - check `exp` / `nbf`
        Raises:
          - TokenExpiredError
          - DecodeError (or one of its subclasses)
        """
        ...
