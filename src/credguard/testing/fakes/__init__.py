"""Testing fakes – in-memory doubles for credguard ports."""
from credguard.testing.fakes.files import InMemoryFileProvider

__all__ = ["InMemoryFileProvider"]
