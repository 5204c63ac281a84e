"""
pkg_jwt

Compact, signed JSON Web Token codec (HS256/384/512, RS256/384/512) with
signature verification and `exp` / `nbf` checks, plus a FastAPI
integration and a small command line.
"""

__version__ = "0.1.0"

from .domain.constants import Algorithm, ReservedClaim, TOKEN_TYPE, DEFAULT_ALGORITHM
from .domain.exceptions import (
    JWTError,
    InvalidArgumentError,
    UnsupportedAlgorithmError,
    InvalidKeyError,
    DecodeError,
    MalformedTokenError,
    InvalidEncodingError,
    InvalidHeaderError,
    ClaimTypeError,
    SignatureVerificationError,
    TokenExpiredError,
    TokenNotYetValidError,
)
from .domain.value_objects import TokenSegments, DecodedToken
from .domain.ports import SigningAlgorithm, TokenDecoder

from .application.use_cases.encode import EncodeTokenUseCase
from .application.use_cases.decode import DecodeTokenUseCase

from .adapters.crypto.registry import ALGORITHMS, get_algorithm, supported_algorithms

from .api import encode, decode, decode_complete, get_unverified_header
from .codec import TokenCodec

__all__ = [
    "__version__",
    # entry points
    "encode",
    "decode",
    "decode_complete",
    "get_unverified_header",
    "TokenCodec",
    # domain core
    "Algorithm",
    "ReservedClaim",
    "TOKEN_TYPE",
    "DEFAULT_ALGORITHM",
    "TokenSegments",
    "DecodedToken",
    "SigningAlgorithm",
    "TokenDecoder",
    # exceptions
    "JWTError",
    "InvalidArgumentError",
    "UnsupportedAlgorithmError",
    "InvalidKeyError",
    "DecodeError",
    "MalformedTokenError",
    "InvalidEncodingError",
    "InvalidHeaderError",
    "ClaimTypeError",
    "SignatureVerificationError",
    "TokenExpiredError",
    "TokenNotYetValidError",
    # use cases
    "EncodeTokenUseCase",
    "DecodeTokenUseCase",
    # registry
    "ALGORITHMS",
    "get_algorithm",
    "supported_algorithms",
]
