"""Hashing – PBKDF2 password hashing with migration-aware verification."""
from __future__ import annotations

import os

from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from credguard.config.settings import HashingSettings
from credguard.config.settings.credentials import check_iteration_count, check_max_iteration_count
from credguard.config.validation import InvalidSettingValueError
from credguard.kernel.errors import CryptoError, require_text
from credguard.observability.logging import get_logger
from credguard.security.hashing.blob import (
    MAX_ITERATION_COUNT,
    MIN_SALT_SIZE,
    MIN_SUBKEY_SIZE,
    HashBlob,
    KeyDerivationPrf,
    MalformedHashError,
)
from credguard.security.hashing.fingerprint import fingerprint_hash
from credguard.security.verification import (
    VerificationStatus,
    b64decode,
    b64encode,
    constant_time_equals,
)

_log = get_logger(__name__)


def derive_subkey(
    secret: str,
    salt: bytes,
    prf: KeyDerivationPrf,
    iteration_count: int,
    length: int,
) -> bytes:
    kdf = PBKDF2HMAC(
        algorithm=prf.algorithm(),
        length=length,
        salt=salt,
        iterations=iteration_count,
    )
    return kdf.derive(secret.encode("utf-8"))


class HashCodec:
    """One-way salted hashing for credentials.

    Stateless apart from its read-only policy, so one instance may be shared
    by any number of threads.

    Parameters
    ----------
    iteration_count:
        PBKDF2 cost for new hashes.  Stored hashes with a lower count still
        verify, but report :attr:`VerificationStatus.SUCCESS_REHASH_NEEDED`.
    prf:
        Pseudorandom function for new hashes.
    salt_size, subkey_size:
        Byte lengths for new hashes; both must be at least 16.
    allow_legacy_plaintext:
        When true, a stored value equal to the provided secret verifies as
        ``SUCCESS_REHASH_NEEDED`` (records written before hashing was
        introduced).  Disable once such records have been migrated.
    max_iteration_count:
        Stored hashes with a higher count verify as ``FAILED`` without
        running PBKDF2, so a corrupted record cannot stall a login.

    Raises
    ------
    ConfigurationError
        When any policy value is out of range.
    """

    def __init__(
        self,
        iteration_count: int = 10000,
        *,
        prf: KeyDerivationPrf = KeyDerivationPrf.HMACSHA256,
        salt_size: int = MIN_SALT_SIZE,
        subkey_size: int = 256 // 8,
        allow_legacy_plaintext: bool = True,
        max_iteration_count: int = MAX_ITERATION_COUNT,
    ) -> None:
        self._iteration_count = check_iteration_count(iteration_count)
        self._max_iteration_count = check_max_iteration_count(max_iteration_count, self._iteration_count)
        if salt_size < MIN_SALT_SIZE:
            raise InvalidSettingValueError("salt_size", salt_size, f"must be >= {MIN_SALT_SIZE}")
        if subkey_size < MIN_SUBKEY_SIZE:
            raise InvalidSettingValueError("subkey_size", subkey_size, f"must be >= {MIN_SUBKEY_SIZE}")
        try:
            self._prf = KeyDerivationPrf(prf)
        except ValueError as exc:
            raise InvalidSettingValueError("prf", prf, "unknown pseudorandom function") from exc
        self._salt_size = salt_size
        self._subkey_size = subkey_size
        self._allow_legacy_plaintext = allow_legacy_plaintext

    @classmethod
    def from_settings(cls, settings: HashingSettings) -> HashCodec:
        return cls(
            settings.iteration_count,
            prf=KeyDerivationPrf[settings.prf],
            salt_size=settings.salt_size,
            subkey_size=settings.subkey_size,
            allow_legacy_plaintext=settings.allow_legacy_plaintext,
            max_iteration_count=settings.max_iteration_count,
        )

    @property
    def iteration_count(self) -> int:
        return self._iteration_count

    @property
    def max_iteration_count(self) -> int:
        return self._max_iteration_count

    @property
    def prf(self) -> KeyDerivationPrf:
        return self._prf

    def hash(self, plaintext: str) -> str:
        """Return a base64 hash blob for *plaintext* under a fresh random salt.

        Raises
        ------
        ArgumentError
            When *plaintext* is ``None`` or empty.
        CryptoError
            When the system random source is unavailable.
        """
        require_text(plaintext, "plaintext")
        try:
            salt = os.urandom(self._salt_size)
        except (OSError, NotImplementedError) as exc:
            raise CryptoError("Random source unavailable", cause=exc) from exc
        subkey = derive_subkey(plaintext, salt, self._prf, self._iteration_count, self._subkey_size)
        blob = HashBlob(prf=self._prf, iteration_count=self._iteration_count, salt=salt, subkey=subkey)
        return b64encode(blob.to_bytes())

    def verify(self, plaintext: str, stored_hash: str) -> VerificationStatus:
        """Check *plaintext* against *stored_hash*.

        Malformed, truncated or foreign stored values yield
        :attr:`VerificationStatus.FAILED`; only empty arguments raise.
        """
        require_text(plaintext, "plaintext")
        require_text(stored_hash, "stored_hash")

        if self._allow_legacy_plaintext and plaintext == stored_hash:
            _log.debug("hash.verify_legacy_plaintext")
            return VerificationStatus.SUCCESS_REHASH_NEEDED

        try:
            blob = HashBlob.from_bytes(b64decode(stored_hash))
        except (ValueError, MalformedHashError):
            _log.debug("hash.verify_malformed")
            return VerificationStatus.FAILED

        if blob.iteration_count > self._max_iteration_count:
            _log.debug(
                "hash.verify_cost_exceeded",
                stored_iteration_count=blob.iteration_count,
                max_iteration_count=self._max_iteration_count,
            )
            return VerificationStatus.FAILED

        actual = derive_subkey(plaintext, blob.salt, blob.prf, blob.iteration_count, len(blob.subkey))
        if not constant_time_equals(actual, blob.subkey):
            return VerificationStatus.FAILED

        if blob.iteration_count < self._iteration_count:
            _log.debug(
                "hash.verify_rehash_needed",
                stored_iteration_count=blob.iteration_count,
                iteration_count=self._iteration_count,
            )
            return VerificationStatus.SUCCESS_REHASH_NEEDED
        return VerificationStatus.SUCCESS

    @staticmethod
    def fingerprint_hash(data: bytes | str) -> str:
        """Fast hex digest for cache keys and ETags; never for credentials."""
        return fingerprint_hash(data)


__all__ = ["HashCodec", "derive_subkey"]
