"""Hashing – self-describing salted hash format.

Layout (all integers big-endian, unsigned 32-bit)::

    [0x01][prf id:4][iteration count:4][salt length:4][salt][subkey]

The layout matches ASP.NET Core Identity "V3" password hashes, so blobs can
be verified across both stacks.
"""
from __future__ import annotations

import dataclasses
import struct
from enum import IntEnum

from cryptography.hazmat.primitives import hashes

FORMAT_MARKER = 0x01
HEADER_SIZE = 13
MIN_SALT_SIZE = 128 // 8
MIN_SUBKEY_SIZE = 128 // 8
MIN_BLOB_SIZE = HEADER_SIZE + MIN_SALT_SIZE + MIN_SUBKEY_SIZE
MAX_ITERATION_COUNT = 0xFFFFFFFF

_HEADER = struct.Struct(">BIII")


class MalformedHashError(ValueError):
    """Stored bytes are not a well-formed hash blob."""


class KeyDerivationPrf(IntEnum):
    """Pseudorandom function used inside PBKDF2; values are the wire ids."""

    HMACSHA1 = 0
    HMACSHA256 = 1
    HMACSHA512 = 2

    def algorithm(self) -> hashes.HashAlgorithm:
        if self is KeyDerivationPrf.HMACSHA1:
            return hashes.SHA1()
        if self is KeyDerivationPrf.HMACSHA256:
            return hashes.SHA256()
        return hashes.SHA512()


@dataclasses.dataclass(frozen=True)
class HashBlob:
    """Decoded hash record; immutable once built."""

    prf: KeyDerivationPrf
    iteration_count: int
    salt: bytes
    subkey: bytes

    def __post_init__(self) -> None:
        if not 1 <= self.iteration_count <= MAX_ITERATION_COUNT:
            raise MalformedHashError(f"iteration count must be between 1 and {MAX_ITERATION_COUNT}")
        if len(self.salt) < MIN_SALT_SIZE:
            raise MalformedHashError(f"salt must be at least {MIN_SALT_SIZE} bytes")
        if len(self.subkey) < MIN_SUBKEY_SIZE:
            raise MalformedHashError(f"subkey must be at least {MIN_SUBKEY_SIZE} bytes")

    def __len__(self) -> int:
        return HEADER_SIZE + len(self.salt) + len(self.subkey)

    def to_bytes(self) -> bytes:
        header = _HEADER.pack(FORMAT_MARKER, int(self.prf), self.iteration_count, len(self.salt))
        return header + self.salt + self.subkey

    @classmethod
    def from_bytes(cls, data: bytes) -> HashBlob:
        """Parse *data*, raising :class:`MalformedHashError` on any violation."""
        if len(data) < MIN_BLOB_SIZE:
            raise MalformedHashError(f"blob shorter than {MIN_BLOB_SIZE} bytes")
        marker, prf_id, iteration_count, salt_length = _HEADER.unpack_from(data)
        if marker != FORMAT_MARKER:
            raise MalformedHashError(f"unknown format marker {marker:#04x}")
        try:
            prf = KeyDerivationPrf(prf_id)
        except ValueError as exc:
            raise MalformedHashError(f"unknown PRF id {prf_id}") from exc
        if salt_length < MIN_SALT_SIZE or HEADER_SIZE + salt_length > len(data):
            raise MalformedHashError("salt length out of range")
        salt = data[HEADER_SIZE:HEADER_SIZE + salt_length]
        subkey = data[HEADER_SIZE + salt_length:]
        return cls(prf=prf, iteration_count=iteration_count, salt=salt, subkey=subkey)


__all__ = [
    "FORMAT_MARKER",
    "HEADER_SIZE",
    "HashBlob",
    "KeyDerivationPrf",
    "MAX_ITERATION_COUNT",
    "MIN_BLOB_SIZE",
    "MalformedHashError",
]
