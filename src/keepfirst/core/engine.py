"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/engine.py
Single-pass deduplication of a directory listing.

For every path, in listing order:
    key → bucket lookup → (on collision) full read → compare with each bucket member
A byte-identical match removes the incoming file; otherwise it joins the bucket.
The first file seen with a given content is therefore always the survivor.

The index is owned by one engine and walked without locking. Iterating a bucket
and appending to it must stay one uninterrupted step: if another worker could
append between the two, a duplicate of the new entry would be missed and end up
registered as a second unique member.
"""

import os
import logging
from typing import Iterable, List, Optional

from keepfirst.core.index import DuplicateIndex
from keepfirst.core.interfaces import KeyExtractor, ContentReader, FileRemover, ProgressSink
from keepfirst.core.key_extractor import PrefixKeyExtractor
from keepfirst.core.models import (
    ScanCounters, ExtractionFailed, ReadFailed, DeletionFailed,
)
from keepfirst.core.reader import FileContentReader

logger = logging.getLogger(__name__)


class DeduplicationEngine:
    """
    Removes exact duplicates from a stream of paths, keeping the first of each content.

    Collaborators are injected so tests can substitute readers or removers that fail.
    Counters belong to the engine instance and start at zero.
    """

    def __init__(
        self,
        remover: FileRemover,
        key_extractor: Optional[KeyExtractor] = None,
        reader: Optional[ContentReader] = None,
        progress: Optional[ProgressSink] = None,
        capacity_hint: int = 0
    ):
        self.remover = remover
        self.key_extractor = key_extractor or PrefixKeyExtractor()
        self.reader = reader or FileContentReader()
        self.progress = progress
        self.index = DuplicateIndex(capacity_hint)
        self.counters = ScanCounters()

    def run(self, paths: Iterable[str]) -> ScanCounters:
        """
        Consumes the listing once and processes every path in order.
        `scanned` grows by one per path whatever the outcome for that file.
        """
        logger.debug(f"Starting deduplication pass ({self.index!r})")
        if self.progress:
            self.progress.start(self.counters)

        for path in paths:
            self.process(path)
            self.counters.scanned += 1
            if self.progress:
                self.progress.file_done(self.counters)

        if self.progress:
            self.progress.finish(self.counters)
        logger.debug(
            f"Pass completed: scanned={self.counters.scanned}, deleted={self.counters.deleted}, "
            f"buckets={len(self.index)}"
        )
        return self.counters

    def process(self, path: str) -> bool:
        """
        Resolves a single file against the index.
        Returns True if the file was identified as a duplicate of an earlier one.
        """
        try:
            key = self.key_extractor.extract(path)
        except ExtractionFailed as e:
            logger.debug(f"Skipping {path}: {e}")
            return False

        bucket = self.index.get(key)
        if bucket is None:
            self.index.add_bucket(key, path)
            logger.debug(f"New key {key:#x} for {path}")
            return False

        if self._already_indexed(path, bucket):
            logger.debug(f"{path} is already indexed, nothing to compare")
            return False

        try:
            data = self.reader.read(path)
        except ReadFailed as e:
            logger.debug(f"Skipping {path}: {e}")
            return False

        for existing in bucket:
            try:
                other = self.reader.read(existing)
            except ReadFailed as e:
                # Unreadable members stay indexed; a read error must never cost data
                logger.debug(f"Cannot compare with {existing}: {e}")
                continue

            if other == data:
                logger.debug(f"{path} duplicates {existing}")
                self._remove_duplicate(path, len(data))
                return True

        self.index.append(key, path)
        logger.debug(f"{path} is unique within key {key:#x}")
        return False

    @staticmethod
    def _already_indexed(path: str, bucket: List[str]) -> bool:
        """A file must never be compared with itself: it would match and be removed."""
        target = os.path.normcase(os.path.abspath(path))
        return any(os.path.normcase(os.path.abspath(existing)) == target for existing in bucket)

    def _remove_duplicate(self, path: str, size: int) -> None:
        """A duplicate is never indexed, whether or not its removal succeeds."""
        try:
            self.remover.remove(path)
        except DeletionFailed as e:
            logger.warning(f"Keeping {path}: {e}")
            if self.progress:
                self.progress.deletion_failed(e)
            return
        self.counters.deleted += 1
        self.counters.bytes_freed += size
