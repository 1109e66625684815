"""Property-based tests for hashing and encryption round trips."""

from __future__ import annotations

from hypothesis import assume, given, settings

from credguard.security.encryption import EncryptionCodec
from credguard.security.hashing import HashCodec
from credguard.security.keys import KeyStore
from credguard.security.verification import VerificationStatus
from credguard.testing.fakes import InMemoryFileProvider
from credguard.testing.generators import secret_strategy

# Built once per module: hypothesis rejects function-scoped fixtures in @given.
HASH_CODEC = HashCodec(500)
ENCRYPTION_CODEC = EncryptionCodec(KeyStore(InMemoryFileProvider()))

PBKDF2 = settings(max_examples=25, deadline=None)
RSA = settings(max_examples=15, deadline=None)


@PBKDF2
@given(secret_strategy())
def test_hash_then_verify_succeeds(secret: str) -> None:
    assert HASH_CODEC.verify(secret, HASH_CODEC.hash(secret)) is VerificationStatus.SUCCESS


@PBKDF2
@given(secret_strategy(), secret_strategy())
def test_different_secret_fails(secret: str, other: str) -> None:
    assume(secret != other)
    assert HASH_CODEC.verify(other, HASH_CODEC.hash(secret)) is VerificationStatus.FAILED


@PBKDF2
@given(secret_strategy())
def test_raw_value_is_legacy_match(secret: str) -> None:
    assert HASH_CODEC.verify(secret, secret) is VerificationStatus.SUCCESS_REHASH_NEEDED


@PBKDF2
@given(secret_strategy())
def test_arbitrary_stored_text_never_raises(stored: str) -> None:
    assume(stored != "secret")
    assert HASH_CODEC.verify("secret", stored) is VerificationStatus.FAILED


@RSA
@given(secret_strategy())
def test_encrypt_then_decrypt_returns_secret(secret: str) -> None:
    first = ENCRYPTION_CODEC.encrypt(secret)
    second = ENCRYPTION_CODEC.encrypt(secret)
    assert first != second
    assert ENCRYPTION_CODEC.decrypt(first) == secret
    assert ENCRYPTION_CODEC.decrypt(second) == secret


@RSA
@given(secret_strategy())
def test_encrypted_value_verifies(secret: str) -> None:
    assert ENCRYPTION_CODEC.verify(secret, ENCRYPTION_CODEC.encrypt(secret)) is VerificationStatus.SUCCESS
