"""Encryption – reversible RSA encryption of stored secrets."""
from __future__ import annotations

from credguard.config.settings import EncryptionSettings
from credguard.kernel.errors import (
    ArgumentError,
    CryptoError,
    DecryptionError,
    require_text,
)
from credguard.observability.logging import get_logger
from credguard.security.encryption.padding import DEFAULT_PADDING, PaddingScheme
from credguard.security.keys import KeyPair, KeyStore
from credguard.security.verification import (
    VerificationStatus,
    b64decode,
    b64encode,
    constant_time_equals,
)

_log = get_logger(__name__)


class EncryptionCodec:
    """Encrypt secrets that must be recovered later.

    The default key pair is requested from the :class:`KeyStore` on first
    use, not at construction, so building a codec never touches the disk.
    Every method also accepts an explicit ``key_pair``.
    """

    def __init__(
        self,
        key_store: KeyStore,
        *,
        key_path: str | None = None,
        padding: PaddingScheme = DEFAULT_PADDING,
        allow_legacy_plaintext: bool = True,
    ) -> None:
        self._key_store = key_store
        self._key_path = key_path
        self._padding = PaddingScheme(padding)
        self._allow_legacy_plaintext = allow_legacy_plaintext

    @classmethod
    def from_settings(
        cls,
        settings: EncryptionSettings,
        key_store: KeyStore,
        key_path: str | None = None,
    ) -> EncryptionCodec:
        return cls(
            key_store,
            key_path=key_path,
            padding=PaddingScheme(settings.padding),
            allow_legacy_plaintext=settings.allow_legacy_plaintext,
        )

    @property
    def default_padding(self) -> PaddingScheme:
        return self._padding

    def key_pair(self) -> KeyPair:
        return self._key_store.get_or_create(self._key_path)

    def encrypt(
        self,
        plaintext: str,
        padding: PaddingScheme | None = None,
        *,
        key_pair: KeyPair | None = None,
    ) -> str:
        """Encrypt *plaintext* and return base64 ciphertext.

        Raises
        ------
        ArgumentError
            When *plaintext* is ``None`` or empty.
        CryptoError
            When the plaintext is too long for the key / padding, or the key
            cannot be provisioned.
        """
        require_text(plaintext, "plaintext")
        scheme = PaddingScheme(padding or self._padding)
        key_pair = key_pair or self.key_pair()
        try:
            ciphertext = key_pair.public_key.encrypt(plaintext.encode("utf-8"), scheme.to_padding())
        except ValueError as exc:
            raise CryptoError(
                f"Plaintext cannot be encrypted with {scheme.value} under a "
                f"{key_pair.key_size}-bit key (limit {scheme.max_plaintext_size(key_pair.key_size)} bytes)",
                cause=exc,
            ) from exc
        return b64encode(ciphertext)

    def decrypt(
        self,
        ciphertext: str,
        padding: PaddingScheme | None = None,
        *,
        key_pair: KeyPair | None = None,
    ) -> str:
        """Decrypt base64 *ciphertext* back to text.

        Raises
        ------
        ArgumentError
            When *ciphertext* is ``None``, empty, or not base64.
        DecryptionError
            When the ciphertext was not produced under this key and padding.
        """
        require_text(ciphertext, "ciphertext")
        try:
            data = b64decode(ciphertext)
        except ValueError as exc:
            raise ArgumentError("ciphertext", "Argument 'ciphertext' is not valid base64", cause=exc) from exc
        scheme = PaddingScheme(padding or self._padding)
        key_pair = key_pair or self.key_pair()
        try:
            plaintext = key_pair.private_key.decrypt(data, scheme.to_padding())
            return plaintext.decode("utf-8")
        except ValueError as exc:
            raise DecryptionError(
                f"Ciphertext does not match the key at '{key_pair.path}' with {scheme.value}",
                cause=exc,
            ) from exc

    def verify(self, provided: str, stored: str) -> VerificationStatus:
        """Compare *provided* with the secret encrypted in *stored*.

        Undecodable or undecryptable stored values yield
        :attr:`VerificationStatus.FAILED`; only empty arguments raise.
        """
        require_text(provided, "provided")
        require_text(stored, "stored")

        if self._allow_legacy_plaintext and provided == stored:
            _log.debug("encryption.verify_legacy_plaintext")
            return VerificationStatus.SUCCESS_REHASH_NEEDED

        try:
            decrypted = self.decrypt(stored)
        except (ArgumentError, DecryptionError):
            _log.debug("encryption.verify_failed")
            return VerificationStatus.FAILED

        if constant_time_equals(provided.encode("utf-8"), decrypted.encode("utf-8")):
            return VerificationStatus.SUCCESS
        return VerificationStatus.FAILED


__all__ = ["EncryptionCodec"]
