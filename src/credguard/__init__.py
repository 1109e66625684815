"""
credguard – credential protection at rest.

Import path convention::

    from credguard.security.hashing import HashCodec
    from credguard.security.encryption import EncryptionCodec
    from credguard.security.keys import KeyStore
    from credguard.security.verification import VerificationStatus
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
