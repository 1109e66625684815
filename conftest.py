"""Root conftest – exposes credguard's own pytest fixtures to the suite."""

pytest_plugins = ["credguard.testing.fixtures"]
