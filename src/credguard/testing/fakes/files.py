"""Testing fakes – InMemoryFileProvider."""
from __future__ import annotations

import os
import threading
from collections import Counter
from pathlib import Path


class InMemoryFileProvider:
    """Dict-backed :class:`~credguard.security.keys.FileProvider`.

    Every ``file_exists`` / ``read_bytes`` / ``write_bytes`` call is counted in
    :attr:`calls`, so tests can assert that a cached key pair caused no file
    access at all.

    Usage::

        files = InMemoryFileProvider()
        store = KeyStore(files)
        store.get_or_create("keys/app_priv.pem")
        files.reset_calls()
        store.get_or_create("keys/app_priv.pem")
        assert files.total_calls == 0
    """

    def __init__(self, base_directory: str = "/keys") -> None:
        self._base_directory = Path(base_directory)
        self._files: dict[Path, bytes] = {}
        self._modes: dict[Path, str] = {}
        self._lock = threading.Lock()
        self.calls: Counter[str] = Counter()
        self.fail_writes: bool = False

    # ------------------------------------------------------------------
    # FileProvider protocol
    # ------------------------------------------------------------------

    @property
    def base_directory(self) -> Path:
        return self._base_directory

    def resolve(self, path: str | os.PathLike[str]) -> Path:
        return Path(os.path.normpath(self._base_directory / path))

    def file_exists(self, path: Path) -> bool:
        with self._lock:
            self.calls["file_exists"] += 1
            return path in self._files

    def read_bytes(self, path: Path) -> bytes:
        with self._lock:
            self.calls["read_bytes"] += 1
            if path not in self._files:
                raise FileNotFoundError(str(path))
            return self._files[path]

    def write_bytes(
        self,
        path: Path,
        data: bytes,
        *,
        exclusive: bool = False,
        private: bool = False,
    ) -> None:
        with self._lock:
            self.calls["write_bytes"] += 1
            if self.fail_writes:
                raise PermissionError(f"Read-only file system: '{path}'")
            if exclusive and path in self._files:
                raise FileExistsError(str(path))
            self._files[path] = bytes(data)
            self._modes[path] = "private" if private else "public"

    # ------------------------------------------------------------------
    # Test-setup helpers
    # ------------------------------------------------------------------

    def seed(self, path: str | os.PathLike[str], data: bytes) -> "InMemoryFileProvider":
        """Place *data* at *path* without counting it as an access."""
        self._files[self.resolve(path)] = data
        return self

    def contents(self, path: str | os.PathLike[str]) -> bytes:
        return self._files[self.resolve(path)]

    def is_private(self, path: str | os.PathLike[str]) -> bool:
        return self._modes.get(self.resolve(path)) == "private"

    @property
    def paths(self) -> list[Path]:
        return sorted(self._files)

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    def reset_calls(self) -> None:
        self.calls.clear()


__all__ = ["InMemoryFileProvider"]
