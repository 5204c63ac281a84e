from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ...domain.base64url import b64url_encode
from ...domain.constants import Algorithm, DEFAULT_ALGORITHM, TOKEN_TYPE, parse_algorithm
from ...domain.exceptions import InvalidArgumentError, UnsupportedAlgorithmError
from ...domain.ports import KeyMaterial, SigningAlgorithm

RESERVED_HEADERS = frozenset({"typ", "alg"})


def _to_json_segment(value: Mapping[str, Any], label: str) -> str:
    try:
        raw = json.dumps(dict(value), separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{label} is not JSON-serializable: {exc}") from exc
    return b64url_encode(raw.encode("utf-8"))


@dataclass(slots=True)
class EncodeTokenUseCase:
    """
    Application use case:
    - Build the `{typ, alg}` header
    - Serialize header and claims, sign the signing input
    - Assemble the compact token

    Pure function of its inputs; the registry is the only collaborator.
    """

    algorithms: Mapping[Algorithm, SigningAlgorithm]

    def execute(
            self,
            claims: Mapping[str, Any],
            key: KeyMaterial,
            alg: Algorithm | str = DEFAULT_ALGORITHM,
            headers: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Returns:
            Compact token string (header.payload.signature).

        Raises:
            InvalidArgumentError
            UnsupportedAlgorithmError
            InvalidKeyError
        """
        if not isinstance(claims, Mapping):
            raise InvalidArgumentError(
                f"claims must be a mapping, got {type(claims).__name__}"
            )
        if not isinstance(key, (str, bytes)) or not key:
            raise InvalidArgumentError("key must be a non-empty str or bytes")

        algorithm = parse_algorithm(alg)
        signer = self.algorithms.get(algorithm)
        if signer is None:
            raise UnsupportedAlgorithmError(f"Algorithm not supported: {algorithm.value}")

        header = self._build_header(algorithm, headers)
        signing_input = ".".join((
            _to_json_segment(header, "header"),
            _to_json_segment(claims, "claims"),
        ))
        signature = signer.sign(signing_input.encode("ascii"), key)

        return f"{signing_input}.{b64url_encode(signature)}"

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_header(
            algorithm: Algorithm,
            extra: Optional[Mapping[str, Any]],
    ) -> dict[str, Any]:
        header: dict[str, Any] = {"typ": TOKEN_TYPE, "alg": algorithm.value}
        if not extra:
            return header

        if not isinstance(extra, Mapping):
            raise InvalidArgumentError("headers must be a mapping")
        clashing = RESERVED_HEADERS.intersection(extra)
        if clashing:
            raise InvalidArgumentError(
                f"headers may not override {', '.join(sorted(clashing))}"
            )
        header.update(extra)
        return header
