"""Infrastructure errors — cipher failures and key material I/O."""

from __future__ import annotations

from typing import Any

from credguard.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller contract violation."""

    default_code = "infrastructure_error"


class CryptoError(InfrastructureError):
    """A cryptographic primitive, its randomness source, or its key material failed."""

    default_code = "crypto_error"


class KeyStoreError(CryptoError):
    """Key material for *path* could not be read, parsed, or persisted."""

    default_code = "key_store_error"

    def __init__(
        self,
        path: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Key material at '{path}' is unusable", **kwargs)
        self.path = path


class DecryptionError(CryptoError):
    """Ciphertext does not correspond to the key / padding combination."""

    default_code = "decryption_error"


__all__ = [
    "CryptoError",
    "DecryptionError",
    "InfrastructureError",
    "KeyStoreError",
]
