"""Encryption – RSA padding schemes."""
from __future__ import annotations

from enum import Enum

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

_OAEP_HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "OAEP_SHA1": hashes.SHA1,
    "OAEP_SHA256": hashes.SHA256,
    "OAEP_SHA384": hashes.SHA384,
    "OAEP_SHA512": hashes.SHA512,
}


class PaddingScheme(str, Enum):
    """Padding applied before RSA encryption.

    Ciphertext only decrypts under the scheme it was produced with.
    """

    OAEP_SHA1 = "OAEP_SHA1"
    OAEP_SHA256 = "OAEP_SHA256"
    OAEP_SHA384 = "OAEP_SHA384"
    OAEP_SHA512 = "OAEP_SHA512"
    PKCS1V15 = "PKCS1V15"

    def to_padding(self) -> padding.AsymmetricPadding:
        if self is PaddingScheme.PKCS1V15:
            return padding.PKCS1v15()
        algorithm = _OAEP_HASHES[self.value]
        return padding.OAEP(
            mgf=padding.MGF1(algorithm=algorithm()),
            algorithm=algorithm(),
            label=None,
        )

    def max_plaintext_size(self, key_size: int) -> int:
        """Largest plaintext, in bytes, a *key_size*-bit key can carry."""
        modulus_bytes = key_size // 8
        if self is PaddingScheme.PKCS1V15:
            return modulus_bytes - 11
        digest_size = _OAEP_HASHES[self.value].digest_size
        return modulus_bytes - 2 * digest_size - 2


DEFAULT_PADDING = PaddingScheme.OAEP_SHA512

__all__ = ["DEFAULT_PADDING", "PaddingScheme"]
