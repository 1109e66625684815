"""Config settings – policies for hashing, key storage and encryption.

Every value is checked in ``__post_init__`` so a bad deployment fails when the
settings object is built, not on the first login.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from credguard.config.settings.base import Settings
from credguard.config.validation import InvalidSettingValueError

PRF_NAMES: tuple[str, ...] = ("HMACSHA1", "HMACSHA256", "HMACSHA512")
PADDING_NAMES: tuple[str, ...] = (
    "OAEP_SHA1",
    "OAEP_SHA256",
    "OAEP_SHA384",
    "OAEP_SHA512",
    "PKCS1V15",
)

MIN_SALT_SIZE = 128 // 8
MIN_SUBKEY_SIZE = 128 // 8
MIN_KEY_SIZE = 1024
# Iteration counts are stored as unsigned 32-bit integers in the hash header.
MAX_ITERATION_COUNT = 0xFFFFFFFF


def check_iteration_count(value: object) -> int:
    """Return *value* when it is a usable PBKDF2 iteration count."""
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= MAX_ITERATION_COUNT:
        raise InvalidSettingValueError(
            "iteration_count", value, f"must be an integer between 1 and {MAX_ITERATION_COUNT}"
        )
    return value


def check_max_iteration_count(value: object, iteration_count: int) -> int:
    """Return *value* when it is a usable verification cost ceiling."""
    if isinstance(value, bool) or not isinstance(value, int) or not iteration_count <= value <= MAX_ITERATION_COUNT:
        raise InvalidSettingValueError(
            "max_iteration_count",
            value,
            f"must be an integer between iteration_count and {MAX_ITERATION_COUNT}",
        )
    return value


@dataclasses.dataclass
class HashingSettings(Settings):
    """One-way hashing policy (``CREDGUARD_HASHING_*``)."""

    _prefix: ClassVar[str] = "CREDGUARD_HASHING"

    iteration_count: int = 10000
    prf: str = "HMACSHA256"
    salt_size: int = MIN_SALT_SIZE
    subkey_size: int = 256 // 8
    allow_legacy_plaintext: bool = True
    # Stored hashes above this cost verify as FAILED without running PBKDF2.
    max_iteration_count: int = MAX_ITERATION_COUNT

    def _validate(self) -> None:
        check_iteration_count(self.iteration_count)
        check_max_iteration_count(self.max_iteration_count, self.iteration_count)
        if self.prf.upper() not in PRF_NAMES:
            raise InvalidSettingValueError("prf", self.prf, f"expected one of {', '.join(PRF_NAMES)}")
        self.prf = self.prf.upper()
        if self.salt_size < MIN_SALT_SIZE:
            raise InvalidSettingValueError("salt_size", self.salt_size, f"must be >= {MIN_SALT_SIZE}")
        if self.subkey_size < MIN_SUBKEY_SIZE:
            raise InvalidSettingValueError("subkey_size", self.subkey_size, f"must be >= {MIN_SUBKEY_SIZE}")


@dataclasses.dataclass
class KeyStoreSettings(Settings):
    """Where and how reversible-encryption keys are provisioned (``CREDGUARD_KEYS_*``)."""

    _prefix: ClassVar[str] = "CREDGUARD_KEYS"

    base_directory: str = "."
    key_size: int = 2048
    private_key_file_name: str = "rsa_2048_priv.pem"
    public_key_file_name: str = "rsa_2048_pub.pem"

    def _validate(self) -> None:
        if not self.base_directory:
            raise InvalidSettingValueError("base_directory", self.base_directory, "must not be empty")
        if self.key_size < MIN_KEY_SIZE:
            raise InvalidSettingValueError("key_size", self.key_size, f"must be >= {MIN_KEY_SIZE}")
        for name in ("private_key_file_name", "public_key_file_name"):
            if not getattr(self, name):
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")
        if self.private_key_file_name == self.public_key_file_name:
            raise InvalidSettingValueError(
                "public_key_file_name",
                self.public_key_file_name,
                "must differ from private_key_file_name",
            )


@dataclasses.dataclass
class EncryptionSettings(Settings):
    """Reversible encryption policy (``CREDGUARD_ENCRYPTION_*``)."""

    _prefix: ClassVar[str] = "CREDGUARD_ENCRYPTION"

    padding: str = "OAEP_SHA512"
    allow_legacy_plaintext: bool = True

    def _validate(self) -> None:
        if self.padding.upper() not in PADDING_NAMES:
            raise InvalidSettingValueError(
                "padding", self.padding, f"expected one of {', '.join(PADDING_NAMES)}"
            )
        self.padding = self.padding.upper()


__all__ = [
    "EncryptionSettings",
    "HashingSettings",
    "KeyStoreSettings",
    "MAX_ITERATION_COUNT",
    "PADDING_NAMES",
    "PRF_NAMES",
    "check_iteration_count",
    "check_max_iteration_count",
]
