"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication system.
These protocols enforce structural typing using Python's `typing.Protocol` so the
engine can be driven with alternative key schemes, readers or removers in tests.

Key Components:
---------------
- KeyExtractor: Derives a grouping key from a file's leading bytes.
- ContentReader: Reads a file's full content.
- FileRemover: Removes a confirmed duplicate.
- ProgressSink: Receives counter updates and deletion failures.
- DirectoryListing: Single-pass source of candidate paths.
"""

from typing import Protocol, Iterator

from keepfirst.core.models import GroupingKey, ScanCounters, DeletionFailed


# ===== Interfaces =====

class KeyExtractor(Protocol):
    """Interface for deriving a grouping key. Raises ExtractionFailed."""
    width: int

    def extract(self, path: str) -> GroupingKey: ...


class ContentReader(Protocol):
    """Interface for reading a whole file. Raises ReadFailed."""
    def read(self, path: str) -> bytes: ...


class FileRemover(Protocol):
    """Interface for removing a duplicate. Raises DeletionFailed."""
    def remove(self, path: str) -> None: ...


class ProgressSink(Protocol):
    """Interface for progress reporting during a deduplication pass."""
    def start(self, counters: ScanCounters) -> None: ...
    def file_done(self, counters: ScanCounters) -> None: ...
    def finish(self, counters: ScanCounters) -> None: ...
    def deletion_failed(self, error: DeletionFailed) -> None: ...


class DirectoryListing(Protocol):
    """
    Interface for the single-pass source of candidate paths.

    Methods:
        size_hint: Expected number of paths, used to size the index.
        iter_paths: Yields paths lazily, in listing order, exactly once.
    """
    def size_hint(self) -> int: ...
    def iter_paths(self) -> Iterator[str]: ...
