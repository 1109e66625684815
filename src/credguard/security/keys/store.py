"""Keys – KeyStore: lazy, cached provisioning of RSA key pairs per file path.

Once anything has been encrypted under a key, that private key file is the
only way back to the plaintext.  The store therefore never overwrites or
regenerates an existing private key file, and an unreadable one is an error
rather than a reason to start over.
"""
from __future__ import annotations

import dataclasses
import os
import threading
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from credguard.config.settings import KeyStoreSettings
from credguard.config.settings.credentials import MIN_KEY_SIZE
from credguard.config.validation import InvalidSettingValueError
from credguard.kernel.errors import KeyStoreError
from credguard.observability.logging import get_logger
from credguard.security.keys.files import FileProvider, LocalFileProvider

_log = get_logger(__name__)

PUBLIC_EXPONENT = 65537
DEFAULT_PRIVATE_KEY_FILE_NAME = "rsa_2048_priv.pem"
DEFAULT_PUBLIC_KEY_FILE_NAME = "rsa_2048_pub.pem"


@dataclasses.dataclass(frozen=True)
class KeyPair:
    """RSA key material loaded from, or persisted to, ``path``."""

    path: Path
    private_key: rsa.RSAPrivateKey = dataclasses.field(repr=False)

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self.private_key.public_key()

    @property
    def key_size(self) -> int:
        return self.private_key.key_size

    def public_pem(self) -> bytes:
        return self.public_key.public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )


class KeyStore:
    """Resolve or provision one :class:`KeyPair` per private key path.

    The cache belongs to this instance; share the instance to share keys.
    Provisioning for a path runs under a lock dedicated to that path, so two
    threads asking for a missing key never both generate one.

    Parameters
    ----------
    files:
        A :class:`FileProvider`, or a base directory for a
        :class:`LocalFileProvider`.  Relative key paths resolve against it.
    key_size:
        RSA modulus size for newly generated keys.
    private_key_file_name, public_key_file_name:
        Default file names used by :meth:`get_default`.
    passphrase:
        Optional passphrase protecting private key files at rest.
    """

    def __init__(
        self,
        files: FileProvider | str | os.PathLike[str] = ".",
        *,
        key_size: int = 2048,
        private_key_file_name: str = DEFAULT_PRIVATE_KEY_FILE_NAME,
        public_key_file_name: str = DEFAULT_PUBLIC_KEY_FILE_NAME,
        passphrase: bytes | None = None,
    ) -> None:
        if key_size < MIN_KEY_SIZE:
            raise InvalidSettingValueError("key_size", key_size, f"must be >= {MIN_KEY_SIZE}")
        if isinstance(files, (str, os.PathLike)):
            files = LocalFileProvider(files)
        self._files = files
        self._key_size = key_size
        self._private_key_file_name = private_key_file_name
        self._public_key_file_name = public_key_file_name
        self._passphrase = passphrase
        self._cache: dict[Path, KeyPair] = {}
        self._locks: dict[Path, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: KeyStoreSettings,
        files: FileProvider | None = None,
        passphrase: bytes | None = None,
    ) -> KeyStore:
        return cls(
            files if files is not None else LocalFileProvider(settings.base_directory),
            key_size=settings.key_size,
            private_key_file_name=settings.private_key_file_name,
            public_key_file_name=settings.public_key_file_name,
            passphrase=passphrase,
        )

    @property
    def key_size(self) -> int:
        return self._key_size

    def resolve(self, path: str | os.PathLike[str] | None = None) -> Path:
        """Normalised absolute location of the private key file for *path*."""
        return self._files.resolve(path if path is not None else self._private_key_file_name)

    def public_key_path(self, path: str | os.PathLike[str] | None = None) -> Path:
        """Sibling file holding the public half of the key at *path*.

        ``name_priv.pem`` pairs with ``name_pub.pem``; any other name gets a
        ``_pub`` suffix on its stem.
        """
        private_path = self.resolve(path)
        if private_path.name == self._private_key_file_name:
            return private_path.with_name(self._public_key_file_name)
        stem = private_path.stem
        if stem.endswith("_priv"):
            stem = stem[: -len("_priv")]
        return private_path.with_name(f"{stem}_pub{private_path.suffix}")

    def contains(self, path: str | os.PathLike[str] | None = None) -> bool:
        """Whether a key pair for *path* is already cached."""
        return self.resolve(path) in self._cache

    def get_default(self) -> KeyPair:
        return self.get_or_create(None)

    def get_or_create(self, path: str | os.PathLike[str] | None = None) -> KeyPair:
        """Return the key pair stored at *path*, generating it on first use.

        Raises
        ------
        KeyStoreError
            When the key file cannot be read, parsed or written.
        """
        target = self.resolve(path)
        cached = self._cache.get(target)
        if cached is not None:
            _log.debug("key_pair.cache_hit", path=str(target))
            return cached

        with self._lock_for(target):
            cached = self._cache.get(target)
            if cached is not None:
                return cached
            if self._files.file_exists(target):
                key_pair = self._load(target)
            else:
                key_pair = self._generate(target)
            self._cache[target] = key_pair
            return key_pair

    def public_key_pem(self, path: str | os.PathLike[str] | None = None) -> bytes:
        """PEM public key for collaborators that only verify or encrypt."""
        return self.get_or_create(path).public_pem()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _lock_for(self, target: Path) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(target)
            if lock is None:
                lock = self._locks[target] = threading.Lock()
            return lock

    def _load(self, target: Path) -> KeyPair:
        try:
            data = self._files.read_bytes(target)
        except OSError as exc:
            _log.error("key_pair.load_failed", path=str(target), error=str(exc))
            raise KeyStoreError(str(target), f"Cannot read key file '{target}'", cause=exc) from exc
        try:
            private_key = serialization.load_pem_private_key(data, password=self._passphrase)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            _log.error("key_pair.load_failed", path=str(target), error=type(exc).__name__)
            raise KeyStoreError(str(target), f"Key file '{target}' is corrupted", cause=exc) from exc
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise KeyStoreError(str(target), f"Key file '{target}' does not hold an RSA private key")
        _log.info("key_pair.loaded", path=str(target), key_size=private_key.key_size)
        return KeyPair(path=target, private_key=private_key)

    def _generate(self, target: Path) -> KeyPair:
        private_key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=self._key_size)
        if self._passphrase:
            encryption: serialization.KeySerializationEncryption = (
                serialization.BestAvailableEncryption(self._passphrase)
            )
        else:
            encryption = serialization.NoEncryption()
        private_pem = private_key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            encryption,
        )
        key_pair = KeyPair(path=target, private_key=private_key)
        public_path = self.public_key_path(target)
        try:
            self._files.write_bytes(target, private_pem, exclusive=True, private=True)
            self._files.write_bytes(public_path, key_pair.public_pem())
        except OSError as exc:
            _log.error("key_pair.persist_failed", path=str(target), error=str(exc))
            raise KeyStoreError(str(target), f"Cannot persist key pair at '{target}'", cause=exc) from exc
        _log.info(
            "key_pair.generated",
            path=str(target),
            public_path=str(public_path),
            key_size=self._key_size,
        )
        return key_pair


__all__ = [
    "DEFAULT_PRIVATE_KEY_FILE_NAME",
    "DEFAULT_PUBLIC_KEY_FILE_NAME",
    "KeyPair",
    "KeyStore",
]
