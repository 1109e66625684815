"""Security — hashing, reversible encryption, key provisioning, ETags."""
from credguard.security.encryption import EncryptionCodec, PaddingScheme
from credguard.security.etag import EtagFactory
from credguard.security.hashing import HashBlob, HashCodec, KeyDerivationPrf, fingerprint_hash
from credguard.security.keys import FileProvider, KeyPair, KeyStore, LocalFileProvider
from credguard.security.verification import VerificationStatus

__all__ = [
    "EncryptionCodec",
    "EtagFactory",
    "FileProvider",
    "HashBlob",
    "HashCodec",
    "KeyDerivationPrf",
    "KeyPair",
    "KeyStore",
    "LocalFileProvider",
    "PaddingScheme",
    "VerificationStatus",
    "fingerprint_hash",
]
