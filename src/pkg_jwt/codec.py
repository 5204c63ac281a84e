from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .adapters.crypto.registry import ALGORITHMS
from .application.use_cases.decode import DecodeTokenUseCase
from .application.use_cases.encode import EncodeTokenUseCase
from .domain.constants import Algorithm, DEFAULT_ALGORITHM, parse_algorithm
from .domain.exceptions import InvalidArgumentError
from .domain.ports import Clock, KeyMaterial, TokenDecoder
from .domain.value_objects import DecodedToken


@dataclass(slots=True)
class TokenCodec(TokenDecoder):
    """
    Encoder + decoder bound to one algorithm and its key material.

    - `key` signs (shared secret, or RSA private key)
    - `verify_key` verifies (RSA public key, certificate or private key);
      defaults to `key`, so an RSA codec with only a private key round-trips

    Only tokens naming the configured algorithm are accepted on decode.
    """

    key: Optional[KeyMaterial] = None
    algorithm: Algorithm | str = DEFAULT_ALGORITHM
    verify_key: Optional[KeyMaterial] = None
    clock: Clock = time.time

    _encoder: EncodeTokenUseCase = field(init=False, repr=False)
    _decoder: DecodeTokenUseCase = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.algorithm = parse_algorithm(self.algorithm)
        self._encoder = EncodeTokenUseCase(algorithms=ALGORITHMS)
        self._decoder = DecodeTokenUseCase(
            algorithms=ALGORITHMS,
            clock=self.clock,
            allowed_algorithms=frozenset({self.algorithm}),
        )

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def decode(self, token: str) -> Mapping[str, Any]:
        return self.decode_complete(token).payload

    # ------------------------------------------------------------------ #
    # Codec operations
    # ------------------------------------------------------------------ #

    def encode(
            self,
            claims: Mapping[str, Any],
            headers: Optional[Mapping[str, Any]] = None,
    ) -> str:
        if self.key is None:
            raise InvalidArgumentError("TokenCodec has no signing key")
        return self._encoder.execute(claims, self.key, self.algorithm, headers)

    def decode_complete(self, token: str) -> DecodedToken:
        verify_key = self.verify_key if self.verify_key is not None else self.key
        if verify_key is None:
            raise InvalidArgumentError("TokenCodec has no verification key")
        return self._decoder.execute(token, verify_key, verify=True)

    def decode_unverified(self, token: str) -> Dict[str, Any]:
        return self._decoder.execute(token, verify=False).payload
