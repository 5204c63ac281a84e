from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Any, Callable

from ...domain.ports import KeyMaterial
from .keys import force_bytes


@dataclass(frozen=True, slots=True)
class HMACAlgorithm:
    """
    Shared-secret family: the same key signs and verifies.
    """

    digest: Callable[..., Any]

    def sign(self, data: bytes, key: KeyMaterial) -> bytes:
        return hmac.new(force_bytes(key), data, self.digest).digest()

    def verify(self, data: bytes, signature: bytes, key: KeyMaterial) -> bool:
        return hmac.compare_digest(self.sign(data, key), signature)


HS256 = HMACAlgorithm(hashlib.sha256)
HS384 = HMACAlgorithm(hashlib.sha384)
HS512 = HMACAlgorithm(hashlib.sha512)
