"""Test factories for creating test data."""

from tests.factories.filesystem import MemoryFile, MemoryFilesystem

__all__ = [
    "MemoryFile",
    "MemoryFilesystem",
]
