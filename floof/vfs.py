"""Read-only file access to the sounds held in a registry."""

from __future__ import annotations

import os

from floof.registry import SoundRegistry


class VFSError(OSError):
    """Base class for errors raised by the embedded file system."""


class AccessDeniedError(VFSError, PermissionError):
    """Raised when a sound is opened for writing."""


class SoundNotFoundError(VFSError, FileNotFoundError):
    """Raised when no sound has the requested name."""


class BadSeekError(VFSError):
    """Raised when a seek would move outside the data."""


class EmbeddedFile:
    """A read-only, seekable binary file over an in-memory buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._cursor = 0
        self.closed = False

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def read(self, size: int | None = -1) -> bytes:
        """Read up to ``size`` bytes; a negative or missing size reads the rest."""
        self._check_open()
        end = len(self._data) if size is None or size < 0 else min(
            self._cursor + size, len(self._data)
        )
        chunk = self._data[self._cursor:end]
        self._cursor = end if end > self._cursor else self._cursor
        return chunk

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the cursor and return its new position."""
        self._check_open()
        if whence == os.SEEK_SET:
            target = offset
        elif whence == os.SEEK_CUR:
            target = self._cursor + offset
        elif whence == os.SEEK_END:
            target = len(self._data) + offset
        else:
            raise ValueError(f"invalid whence: {whence}")
        if not 0 <= target <= len(self._data):
            raise BadSeekError(f"seek position out of range: {target}")
        self._cursor = target
        return target

    def tell(self) -> int:
        self._check_open()
        return self._cursor

    def size(self) -> int:
        return len(self._data)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def writable(self) -> bool:
        return False

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> EmbeddedFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class EmbeddedVFS:
    """Opens registry sounds by name as read-only files."""

    _WRITE_FLAGS = frozenset("wax+")

    def __init__(self, registry: SoundRegistry) -> None:
        self._registry = registry

    def open(self, path: str, mode: str = "rb") -> EmbeddedFile:
        if self._WRITE_FLAGS & set(mode):
            raise AccessDeniedError(f"embedded sounds are read-only: {path!r}")
        sound = self._registry.get(path)
        if sound is None:
            raise SoundNotFoundError(f"no such sound: {path!r}")
        return EmbeddedFile(sound.data)