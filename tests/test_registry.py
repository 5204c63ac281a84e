# tests/test_registry.py
import hashlib
import hmac

import pytest

from pkg_jwt.adapters.crypto.keys import PRIVATE_KEY_ERROR, PUBLIC_KEY_ERROR
from pkg_jwt.adapters.crypto.registry import ALGORITHMS, get_algorithm, supported_algorithms
from pkg_jwt.domain.constants import Algorithm
from pkg_jwt.domain.exceptions import InvalidKeyError, UnsupportedAlgorithmError

DATA = b"header.payload"


def test_registry_contents():
    assert supported_algorithms() == ["HS256", "HS384", "HS512", "RS256", "RS384", "RS512"]
    assert set(ALGORITHMS) == set(Algorithm)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        ALGORITHMS[Algorithm.HS256] = ALGORITHMS[Algorithm.HS512]


def test_get_algorithm_accepts_names_and_members():
    assert get_algorithm("HS256") is ALGORITHMS[Algorithm.HS256]
    assert get_algorithm(Algorithm.RS512) is ALGORITHMS[Algorithm.RS512]


@pytest.mark.parametrize("alg", ["XX999", "hs256", "none", "", None, 256, ["HS256"]])
def test_get_algorithm_rejects_unknown(alg):
    with pytest.raises(UnsupportedAlgorithmError):
        get_algorithm(alg)


# --- HMAC family ---------------------------------------------------------


@pytest.mark.parametrize(
    "alg, digest",
    [("HS256", hashlib.sha256), ("HS384", hashlib.sha384), ("HS512", hashlib.sha512)],
)
def test_hmac_sign_matches_stdlib(alg, digest):
    signer = get_algorithm(alg)
    expected = hmac.new(b"s3cret", DATA, digest).digest()

    assert signer.sign(DATA, "s3cret") == expected
    assert signer.sign(DATA, b"s3cret") == expected


def test_hmac_verify():
    signer = get_algorithm("HS256")
    signature = signer.sign(DATA, "s3cret")

    assert signer.verify(DATA, signature, "s3cret")
    assert not signer.verify(DATA, signature, "wrong")
    assert not signer.verify(b"header.other", signature, "s3cret")
    assert not signer.verify(DATA, signature[:-1], "s3cret")
    assert not signer.verify(DATA, b"", "s3cret")


def test_hmac_digests_differ():
    sigs = {alg: get_algorithm(alg).sign(DATA, "k") for alg in ("HS256", "HS384", "HS512")}
    assert [len(s) for s in sigs.values()] == [32, 48, 64]
    assert not get_algorithm("HS384").verify(DATA, sigs["HS256"], "k")


# --- RSA family ----------------------------------------------------------


@pytest.mark.parametrize("alg", ["RS256", "RS384", "RS512"])
def test_rsa_sign_and_verify_with_public_key(alg, rsa_keys):
    signer = get_algorithm(alg)
    signature = signer.sign(DATA, rsa_keys.private_pem)

    assert len(signature) == 256
    assert signer.verify(DATA, signature, rsa_keys.public_pem)
    assert not signer.verify(b"header.other", signature, rsa_keys.public_pem)


def test_rsa_accepts_der_and_certificates(rsa_keys):
    signer = get_algorithm("RS256")
    signature = signer.sign(DATA, rsa_keys.private_der)

    assert signer.verify(DATA, signature, rsa_keys.public_der)
    assert signer.verify(DATA, signature, rsa_keys.certificate_pem)
    assert signer.verify(DATA, signature, rsa_keys.certificate_der)
    assert signer.verify(DATA, signature, rsa_keys.public_pem.encode("ascii"))


def test_rsa_is_deterministic(rsa_keys):
    signer = get_algorithm("RS256")
    assert signer.sign(DATA, rsa_keys.private_pem) == signer.sign(DATA, rsa_keys.private_der)


def test_rsa_rejects_other_key_and_tampered_signature(rsa_keys, other_rsa_keys):
    signer = get_algorithm("RS256")
    signature = signer.sign(DATA, rsa_keys.private_pem)

    assert not signer.verify(DATA, signature, other_rsa_keys.public_pem)
    assert not signer.verify(DATA, signature, other_rsa_keys.certificate_pem)

    tampered = bytes([signature[0] ^ 0x01]) + signature[1:]
    assert not signer.verify(DATA, tampered, rsa_keys.public_pem)
    assert not signer.verify(DATA, b"short", rsa_keys.public_pem)


def test_rsa_sign_requires_private_key(rsa_keys, ec_private_pem):
    signer = get_algorithm("RS256")

    for bad_key in ("s3cret", rsa_keys.public_pem, rsa_keys.certificate_pem, ec_private_pem):
        with pytest.raises(InvalidKeyError) as exc_info:
            signer.sign(DATA, bad_key)
        assert str(exc_info.value) == PRIVATE_KEY_ERROR


def test_rsa_verify_requires_public_key_or_certificate():
    signer = get_algorithm("RS256")

    with pytest.raises(InvalidKeyError) as exc_info:
        signer.verify(DATA, b"sig", "s3cret")
    assert str(exc_info.value) == PUBLIC_KEY_ERROR


def test_rsa_verify_accepts_private_key(rsa_keys, other_rsa_keys):
    signer = get_algorithm("RS256")
    signature = signer.sign(DATA, rsa_keys.private_pem)

    assert signer.verify(DATA, signature, rsa_keys.private_pem)
    assert signer.verify(DATA, signature, rsa_keys.private_der)
    assert signer.verify(DATA, signature, rsa_keys.private_pem.encode("ascii"))
    assert not signer.verify(DATA, signature, other_rsa_keys.private_pem)


def test_rsa_verify_rejects_non_rsa_private_key(ec_private_pem):
    with pytest.raises(InvalidKeyError) as exc_info:
        get_algorithm("RS256").verify(DATA, b"sig", ec_private_pem)
    assert str(exc_info.value) == PUBLIC_KEY_ERROR


@pytest.mark.parametrize("alg", ["HS256", "RS256"])
def test_unencodable_text_key_is_an_invalid_key(alg):
    # A lone surrogate cannot be encoded as UTF-8.
    signer = get_algorithm(alg)

    with pytest.raises(InvalidKeyError) as exc_info:
        signer.sign(DATA, "\ud800")
    assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    with pytest.raises(InvalidKeyError):
        signer.verify(DATA, b"sig", "\ud800")
