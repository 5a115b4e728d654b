"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Lists the regular files of one directory (no recursion, no symlinks).
Features:
- The directory is opened eagerly so an unlistable path fails before any file is touched
- Paths are yielded lazily, once, in listing order
- Optional name ordering for a deterministic survivor
"""

import os
import logging
from typing import Iterator, List, Optional

from keepfirst.core.models import ListingFailed

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """
    Single-pass source of candidate paths for the deduplication engine.

    Attributes:
        root_dir: Directory to list
        sort_entries: Yield entries sorted by name instead of file-system order
    """

    def __init__(self, root_dir: str, sort_entries: bool = True):
        self.root_dir = root_dir
        self.sort_entries = sort_entries
        self._entries: Optional[List[os.DirEntry]] = None
        self._iterator = None
        self._consumed = False

    def open(self) -> "DirectoryScanner":
        """
        Obtains the directory listing.

        Raises:
            ListingFailed: If the directory does not exist or cannot be read.
        """
        logger.debug(f"Listing directory: {self.root_dir!r}")
        try:
            iterator = os.scandir(self.root_dir)
            if self.sort_entries:
                with iterator:
                    self._entries = sorted(iterator, key=lambda e: e.name)
            else:
                self._iterator = iterator
        except OSError as e:
            logger.error(f"Cannot list directory {self.root_dir!r}: {e}")
            raise ListingFailed(f"Cannot list directory '{self.root_dir}': {e}") from e
        return self

    def size_hint(self) -> int:
        """Number of entries if known in advance, else 0."""
        if self._entries is not None:
            return len(self._entries)
        return 0

    def iter_paths(self) -> Iterator[str]:
        """
        Yields the path of every regular file. Can only be consumed once.
        """
        if self._entries is None and self._iterator is None:
            self.open()
        if self._consumed:
            raise RuntimeError("Directory listing has already been consumed")
        self._consumed = True

        if self._entries is not None:
            yield from self._regular_files(iter(self._entries))
            return

        with self._iterator:
            try:
                yield from self._regular_files(self._iterator)
            except OSError as e:
                # Listing broke off mid-way; files already yielded stay processed
                logger.warning(f"Listing of {self.root_dir!r} interrupted: {e}")

    @staticmethod
    def _regular_files(entries: Iterator[os.DirEntry]) -> Iterator[str]:
        for entry in entries:
            try:
                if entry.is_symlink():
                    logger.debug(f"Skipping symbolic link: {entry.path}")
                    continue
                if not entry.is_file(follow_symlinks=False):
                    logger.debug(f"Skipping non-regular entry: {entry.path}")
                    continue
            except OSError as e:
                logger.debug(f"Could not check type of {entry.path}: {e}")
                continue
            yield entry.path
