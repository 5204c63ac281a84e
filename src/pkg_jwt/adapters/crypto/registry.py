"""
Static signing-algorithm registry.

Built once at import and exposed read-only; there is no way to register
or replace an algorithm at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, List, Mapping

from ...domain.constants import Algorithm, parse_algorithm
from ...domain.ports import SigningAlgorithm
from . import hmac_algorithm, rsa_algorithm

ALGORITHMS: Mapping[Algorithm, SigningAlgorithm] = MappingProxyType({
    Algorithm.HS256: hmac_algorithm.HS256,
    Algorithm.HS384: hmac_algorithm.HS384,
    Algorithm.HS512: hmac_algorithm.HS512,
    Algorithm.RS256: rsa_algorithm.RS256,
    Algorithm.RS384: rsa_algorithm.RS384,
    Algorithm.RS512: rsa_algorithm.RS512,
})


def get_algorithm(alg: Any) -> SigningAlgorithm:
    """
    Look up the sign/verify implementation for an identifier.

    Raises UnsupportedAlgorithmError for anything that is not registered.
    """
    return ALGORITHMS[parse_algorithm(alg)]


def supported_algorithms() -> List[str]:
    return [alg.value for alg in ALGORITHMS]
