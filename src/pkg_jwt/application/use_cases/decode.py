from __future__ import annotations

import json
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, AbstractSet

from ...domain.base64url import b64url_decode
from ...domain.constants import Algorithm, ReservedClaim, TOKEN_TYPE, parse_algorithm
from ...domain.exceptions import (
    ClaimTypeError,
    DecodeError,
    InvalidArgumentError,
    InvalidEncodingError,
    InvalidHeaderError,
    SignatureVerificationError,
    TokenExpiredError,
    TokenNotYetValidError,
    UnsupportedAlgorithmError,
)
from ...domain.ports import Clock, KeyMaterial, SigningAlgorithm
from ...domain.tokenizer import split_token
from ...domain.value_objects import DecodedToken, TokenSegments

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_json_object(raw: bytes, label: str) -> Dict[str, Any]:
    try:
        value = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as exc:
        raise InvalidEncodingError(f"Invalid {label} JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise InvalidEncodingError(f"{label.capitalize()} must be a JSON object")
    return value


def _is_numeric(value: Any) -> bool:
    # JSON booleans arrive as bool, which is an int subclass; overflowing
    # literals such as 1e400 arrive as inf.
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


@dataclass(slots=True)
class DecodeTokenUseCase:
    """
    Application use case:
    - Split the token into its raw segments
    - Decode header, payload and signature
    - Optionally verify header shape, claim types, signature and time window

    Checks run in a fixed order and stop at the first failure. The
    signature is always checked against the raw header and payload
    segments as received.

    `allowed_algorithms` narrows which registered algorithms a token may
    name; None means every algorithm in `algorithms`.
    """

    algorithms: Mapping[Algorithm, SigningAlgorithm]
    clock: Clock = time.time
    allowed_algorithms: Optional[AbstractSet[Algorithm]] = None

    def execute(
            self,
            token: str,
            key: Optional[KeyMaterial] = None,
            verify: Optional[bool] = None,
    ) -> DecodedToken:
        """
        Decode (and by default, when a key is given, verify) a token.

        Raises:
            InvalidArgumentError
            MalformedTokenError
            InvalidEncodingError
            InvalidHeaderError
            ClaimTypeError
            UnsupportedAlgorithmError
            InvalidKeyError
            SignatureVerificationError
            TokenExpiredError
            TokenNotYetValidError
        """
        if verify is None:
            verify = key is not None

        token = self._coerce_token(token)
        if verify and not isinstance(key, (str, bytes)):
            raise InvalidArgumentError("key must be str or bytes to verify a token")

        segments = split_token(token)
        decoded = self._parse(segments)

        if not verify:
            return decoded

        try:
            self._verify(decoded, key)
        except (DecodeError, UnsupportedAlgorithmError) as exc:
            logger.debug("Token rejected: %s: %s", type(exc).__name__, exc)
            raise
        return decoded

    # ------------------------------------------------------------------ #
    # Pipeline steps
    # ------------------------------------------------------------------ #

    @staticmethod
    def _coerce_token(token: Any) -> str:
        if isinstance(token, bytes):
            try:
                return token.decode("ascii")
            except UnicodeDecodeError as exc:
                raise InvalidEncodingError("Token is not ASCII") from exc
        if not isinstance(token, str):
            raise InvalidArgumentError(
                f"token must be a string, got {type(token).__name__}"
            )
        return token

    @staticmethod
    def _parse(segments: TokenSegments) -> DecodedToken:
        header = _parse_json_object(b64url_decode(segments.header), "header")
        payload = _parse_json_object(b64url_decode(segments.payload), "payload")
        signature = b64url_decode(segments.signature)
        return DecodedToken(
            header=header,
            payload=payload,
            signature=signature,
            segments=segments,
        )

    def _verify(self, decoded: DecodedToken, key: KeyMaterial) -> None:
        header, payload = decoded.header, decoded.payload

        if header.get("typ") != TOKEN_TYPE:
            raise InvalidHeaderError("Invalid typ")
        alg = header.get("alg")
        if not isinstance(alg, str):
            raise InvalidHeaderError("Invalid alg")

        for claim in (ReservedClaim.EXPIRES_AT, ReservedClaim.NOT_BEFORE):
            if claim.value in payload and not _is_numeric(payload[claim.value]):
                raise ClaimTypeError(f"{claim.value} must be a number")

        verifier = self._verifier_for(alg)
        signing_input = decoded.segments.signing_input.encode("ascii")
        if not verifier.verify(signing_input, decoded.signature, key):
            raise SignatureVerificationError("Invalid signature")

        self._check_time_window(payload)

    def _verifier_for(self, alg: str) -> SigningAlgorithm:
        algorithm = parse_algorithm(alg)
        if self.allowed_algorithms is not None and algorithm not in self.allowed_algorithms:
            raise UnsupportedAlgorithmError(f"Algorithm not allowed: {alg}")
        verifier = self.algorithms.get(algorithm)
        if verifier is None:
            raise UnsupportedAlgorithmError(f"Algorithm not supported: {alg}")
        return verifier

    def _check_time_window(self, payload: Mapping[str, Any]) -> None:
        now = self.clock()

        exp = payload.get(ReservedClaim.EXPIRES_AT.value)
        if exp is not None and now >= exp:
            raise TokenExpiredError("Token has expired")

        nbf = payload.get(ReservedClaim.NOT_BEFORE.value)
        if nbf is not None and now < nbf:
            raise TokenNotYetValidError("Token is not yet valid")
