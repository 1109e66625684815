"""Security – one-way hashing."""
from credguard.security.hashing.blob import (
    FORMAT_MARKER,
    MIN_BLOB_SIZE,
    HashBlob,
    KeyDerivationPrf,
    MalformedHashError,
)
from credguard.security.hashing.codec import HashCodec
from credguard.security.hashing.fingerprint import fingerprint_hash

__all__ = [
    "FORMAT_MARKER",
    "HashBlob",
    "HashCodec",
    "KeyDerivationPrf",
    "MIN_BLOB_SIZE",
    "MalformedHashError",
    "fingerprint_hash",
]
