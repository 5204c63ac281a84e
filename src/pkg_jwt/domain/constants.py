from enum import Enum
from typing import Any

from .exceptions import UnsupportedAlgorithmError

TOKEN_TYPE = "JWT"
DEFAULT_ALGORITHM = "HS256"


class Algorithm(str, Enum):
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"


class ReservedClaim(str, Enum):
    EXPIRES_AT = "exp"
    NOT_BEFORE = "nbf"


def parse_algorithm(alg: Any) -> Algorithm:
    """Map an identifier (enum member or its name) to an Algorithm."""
    if isinstance(alg, Algorithm):
        return alg
    if isinstance(alg, str):
        try:
            return Algorithm(alg)
        except ValueError:
            pass
    raise UnsupportedAlgorithmError(f"Algorithm not supported: {alg!r}")
