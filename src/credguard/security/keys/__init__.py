"""Security – RSA key provisioning."""
from credguard.security.keys.files import FileProvider, LocalFileProvider
from credguard.security.keys.store import (
    DEFAULT_PRIVATE_KEY_FILE_NAME,
    DEFAULT_PUBLIC_KEY_FILE_NAME,
    KeyPair,
    KeyStore,
)

__all__ = [
    "DEFAULT_PRIVATE_KEY_FILE_NAME",
    "DEFAULT_PUBLIC_KEY_FILE_NAME",
    "FileProvider",
    "KeyPair",
    "KeyStore",
    "LocalFileProvider",
]
