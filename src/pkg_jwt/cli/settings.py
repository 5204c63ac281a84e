from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..codec import TokenCodec
from ..domain.constants import DEFAULT_ALGORITHM

DEFAULT_COOKIE_NAME = "access_token"


@dataclass(slots=True)
class CodecSettings:
    """
    Algorithm + key material for a TokenCodec.

    Host code decides how to construct this (env, config file, etc.).
    For HS* algorithms `signing_key` is the shared secret and
    `verifying_key` is usually left empty.
    """
    algorithm: str = DEFAULT_ALGORITHM
    signing_key: Optional[str] = None
    verifying_key: Optional[str] = None

    # Where integrations look for a token when there is no bearer header
    cookie_name: str = DEFAULT_COOKIE_NAME

    @property
    def effective_verifying_key(self) -> Optional[str]:
        return self.verifying_key or self.signing_key

    def build_codec(self) -> TokenCodec:
        return TokenCodec(
            key=self.signing_key,
            algorithm=self.algorithm,
            verify_key=self.verifying_key or None,
        )
