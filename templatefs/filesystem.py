"""Filesystem capability consumed by the loader.

Any object exposing these methods can back a FilesystemLoader: local disk,
object storage, in-memory fakes, and so on. Backends are responsible for
path security (``..`` segments, absolute paths).
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

Timestamp = int | float | str | datetime


@runtime_checkable
class FileHandle(Protocol):
    """Entry descriptor returned by Filesystem.get."""

    def is_dir(self) -> bool:
        """Return True if the entry is a directory."""
        ...

    def get_timestamp(self) -> Timestamp:
        """Return the entry's last-modified time (POSIX seconds)."""
        ...


@runtime_checkable
class Filesystem(Protocol):
    """Path-based storage capability."""

    def has(self, path: str) -> bool:
        """Return True if an entry exists at path."""
        ...

    def get(self, path: str) -> FileHandle:
        """Return the entry descriptor at path."""
        ...

    def read(self, path: str) -> bytes | str | None:
        """Return the raw content at path, or a falsy non-bytes value on failure."""
        ...
