from __future__ import annotations

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from ...domain.ports import KeyMaterial
from .keys import load_rsa_private_key, load_rsa_public_key


@dataclass(frozen=True, slots=True)
class RSAAlgorithm:
    """
    RSASSA-PKCS1-v1_5 family.

    Signs with a private key, verifies with a public key or with the key
    embedded in an X.509 certificate. The message digest is computed first
    and the digest itself is signed.
    """

    hash_type: type[hashes.HashAlgorithm]

    def _digest(self, data: bytes) -> bytes:
        md = hashes.Hash(self.hash_type())
        md.update(data)
        return md.finalize()

    def sign(self, data: bytes, key: KeyMaterial) -> bytes:
        private_key = load_rsa_private_key(key)
        return private_key.sign(
            self._digest(data),
            padding.PKCS1v15(),
            Prehashed(self.hash_type()),
        )

    def verify(self, data: bytes, signature: bytes, key: KeyMaterial) -> bool:
        public_key = load_rsa_public_key(key)
        try:
            public_key.verify(
                signature,
                self._digest(data),
                padding.PKCS1v15(),
                Prehashed(self.hash_type()),
            )
        except InvalidSignature:
            return False
        return True


RS256 = RSAAlgorithm(hashes.SHA256)
RS384 = RSAAlgorithm(hashes.SHA384)
RS512 = RSAAlgorithm(hashes.SHA512)
