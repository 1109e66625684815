"""Testing fixtures – codecs and key store wired to in-memory doubles."""
from __future__ import annotations

# Low cost keeps suites fast; production deployments use HashingSettings.
FAST_ITERATION_COUNT = 1000

try:
    import pytest

    @pytest.fixture
    def in_memory_files():
        from credguard.testing.fakes import InMemoryFileProvider
        return InMemoryFileProvider()

    @pytest.fixture
    def hash_codec():
        from credguard.security.hashing import HashCodec
        return HashCodec(FAST_ITERATION_COUNT)

    @pytest.fixture
    def key_store(in_memory_files):
        from credguard.security.keys import KeyStore
        return KeyStore(in_memory_files)

    @pytest.fixture
    def encryption_codec(key_store):
        from credguard.security.encryption import EncryptionCodec
        return EncryptionCodec(key_store)

except ImportError:
    pass

__all__ = [
    "FAST_ITERATION_COUNT",
    "encryption_codec",
    "hash_codec",
    "in_memory_files",
    "key_store",
]
