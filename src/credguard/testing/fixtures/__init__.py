"""Testing fixtures – pytest fixtures for credguard.

Register in your ``conftest.py``::

    pytest_plugins = ["credguard.testing.fixtures"]
"""
from credguard.testing.fixtures.security import FAST_ITERATION_COUNT

try:
    import pytest  # noqa: F401

    from credguard.testing.fixtures.security import (
        encryption_codec,
        hash_codec,
        in_memory_files,
        key_store,
    )

except ImportError:
    pass

__all__ = [
    "FAST_ITERATION_COUNT",
    "encryption_codec",
    "hash_codec",
    "in_memory_files",
    "key_store",
]
