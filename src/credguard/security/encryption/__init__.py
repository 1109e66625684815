"""Security – reversible encryption."""
from credguard.security.encryption.codec import EncryptionCodec
from credguard.security.encryption.padding import DEFAULT_PADDING, PaddingScheme

__all__ = ["DEFAULT_PADDING", "EncryptionCodec", "PaddingScheme"]
