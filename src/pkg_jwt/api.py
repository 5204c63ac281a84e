"""
Module-level entry points backed by the static algorithm registry.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .adapters.crypto.registry import ALGORITHMS
from .application.use_cases.decode import DecodeTokenUseCase
from .application.use_cases.encode import EncodeTokenUseCase
from .domain.constants import Algorithm, DEFAULT_ALGORITHM
from .domain.ports import KeyMaterial
from .domain.value_objects import DecodedToken

_encoder = EncodeTokenUseCase(algorithms=ALGORITHMS)
_decoder = DecodeTokenUseCase(algorithms=ALGORITHMS)


def encode(
        claims: Mapping[str, Any],
        key: KeyMaterial,
        alg: Algorithm | str = DEFAULT_ALGORITHM,
        headers: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Sign `claims` with `key` and return a compact token.

    `headers` adds fields such as `kid` next to `typ` and `alg`.
    """
    return _encoder.execute(claims, key, alg, headers)


def decode_complete(
        token: str,
        key: Optional[KeyMaterial] = None,
        verify: Optional[bool] = None,
) -> DecodedToken:
    """
    Like `decode`, but return header, payload and signature together.
    """
    return _decoder.execute(token, key, verify)


def decode(
        token: str,
        key: Optional[KeyMaterial] = None,
        verify: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Return the claims of `token`.

    Verification runs whenever a key is passed, unless `verify=False`.
    Without a key the payload is returned as-is: nothing about it can be
    trusted.
    """
    return decode_complete(token, key, verify).payload


def get_unverified_header(token: str) -> Dict[str, Any]:
    return _decoder.execute(token, verify=False).header
