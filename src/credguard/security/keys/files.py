"""Keys – FileProvider port and its local file-system adapter."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Protocol

PRIVATE_FILE_MODE = 0o600
PUBLIC_FILE_MODE = 0o644


class FileProvider(Protocol):
    """Port: the file system as seen by :class:`~credguard.security.keys.KeyStore`."""

    @property
    def base_directory(self) -> Path: ...

    def resolve(self, path: str | os.PathLike[str]) -> Path: ...
    def file_exists(self, path: Path) -> bool: ...
    def read_bytes(self, path: Path) -> bytes: ...

    def write_bytes(
        self,
        path: Path,
        data: bytes,
        *,
        exclusive: bool = False,
        private: bool = False,
    ) -> None: ...


class LocalFileProvider:
    """Files under *base_directory* on the local disk.

    ``resolve`` is purely lexical, so resolving a path never touches the disk.
    """

    def __init__(self, base_directory: str | os.PathLike[str] = ".") -> None:
        self._base_directory = Path(os.path.abspath(base_directory))

    @property
    def base_directory(self) -> Path:
        return self._base_directory

    def resolve(self, path: str | os.PathLike[str]) -> Path:
        return Path(os.path.normpath(self._base_directory / path))

    def file_exists(self, path: Path) -> bool:
        return path.is_file()

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(
        self,
        path: Path,
        data: bytes,
        *,
        exclusive: bool = False,
        private: bool = False,
    ) -> None:
        """Write *data* to *path*, creating parent directories.

        The file appears complete or not at all: data goes to a temporary
        sibling first and is linked into place only after ``fsync``.  With
        ``exclusive=True`` an existing file is never replaced
        (:class:`FileExistsError`).  ``private=True`` restricts the file to
        its owner.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, staging = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as fh:
                os.chmod(staging, PRIVATE_FILE_MODE if private else PUBLIC_FILE_MODE)
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            if exclusive:
                os.link(staging, path)
            else:
                os.replace(staging, path)
        finally:
            if os.path.exists(staging):
                os.unlink(staging)


__all__ = ["FileProvider", "LocalFileProvider"]
