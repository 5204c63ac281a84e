"""
Key material parsing for the RSA family.

Each extractor is an ordered list of parse attempts. The first attempt
that succeeds wins; when all fail the caller gets an InvalidKeyError.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, TypeVar

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from cryptography.hazmat.primitives.serialization import (
    load_der_private_key,
    load_der_public_key,
    load_pem_private_key,
    load_pem_public_key,
)

from ...domain.exceptions import InvalidKeyError
from ...domain.ports import KeyMaterial

logger = logging.getLogger(__name__)

K = TypeVar("K")

PRIVATE_KEY_ERROR = "key must be a private key in PEM or DER format"
PUBLIC_KEY_ERROR = "key must be an RSA key or X.509 certificate in PEM or DER format"


def force_bytes(key: KeyMaterial) -> bytes:
    if isinstance(key, bytes):
        return key
    if isinstance(key, str):
        try:
            return key.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidKeyError("Key material is not valid UTF-8 text") from exc
    raise InvalidKeyError(f"Key material must be str or bytes, got {type(key).__name__}")


def _first_success(data: bytes, attempts: Sequence[Callable[[bytes], K]]) -> Optional[K]:
    for attempt in attempts:
        try:
            return attempt(data)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            logger.debug("Key parse attempt %s failed: %s", attempt.__name__, exc)
    return None


def _pem_private_key(data: bytes):
    return load_pem_private_key(data, password=None)


def _der_private_key(data: bytes):
    return load_der_private_key(data, password=None)


def _pem_private_key_public_half(data: bytes):
    return _pem_private_key(data).public_key()


def _der_private_key_public_half(data: bytes):
    return _der_private_key(data).public_key()


def _pem_certificate_public_key(data: bytes):
    return x509.load_pem_x509_certificate(data).public_key()


def _der_certificate_public_key(data: bytes):
    return x509.load_der_x509_certificate(data).public_key()


PRIVATE_KEY_ATTEMPTS = (_pem_private_key, _der_private_key)

# Bare public keys, then the public half of a private key, then certificates.
PUBLIC_KEY_ATTEMPTS = (
    load_pem_public_key,
    load_der_public_key,
    _pem_private_key_public_half,
    _der_private_key_public_half,
    _pem_certificate_public_key,
    _der_certificate_public_key,
)


def load_rsa_private_key(key: KeyMaterial) -> RSAPrivateKey:
    private_key = _first_success(force_bytes(key), PRIVATE_KEY_ATTEMPTS)
    if not isinstance(private_key, RSAPrivateKey):
        raise InvalidKeyError(PRIVATE_KEY_ERROR)
    return private_key


def load_rsa_public_key(key: KeyMaterial) -> RSAPublicKey:
    public_key = _first_success(force_bytes(key), PUBLIC_KEY_ATTEMPTS)
    if not isinstance(public_key, RSAPublicKey):
        raise InvalidKeyError(PUBLIC_KEY_ERROR)
    return public_key
