"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["credguard.testing.fixtures"]
"""

from credguard.testing.fakes import InMemoryFileProvider

__all__ = ["InMemoryFileProvider"]
