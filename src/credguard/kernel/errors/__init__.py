"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ArgumentError
    └── InfrastructureError  (infrastructure.py)
        └── CryptoError
            ├── KeyStoreError
            └── DecryptionError

``ConfigurationError`` lives in :mod:`credguard.config.validation` and derives
from :class:`ApplicationError`.
"""

from credguard.kernel.errors.application import (
    ApplicationError,
    ArgumentError,
    require_text,
)
from credguard.kernel.errors.base import BaseError
from credguard.kernel.errors.infrastructure import (
    CryptoError,
    DecryptionError,
    InfrastructureError,
    KeyStoreError,
)

__all__ = [
    "ApplicationError",
    "ArgumentError",
    "BaseError",
    "CryptoError",
    "DecryptionError",
    "InfrastructureError",
    "KeyStoreError",
    "require_text",
]
