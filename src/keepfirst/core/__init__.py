"""
Core deduplication engine — scanner, key extraction, index and single-pass orchestrator.

This package contains the foundation of keepfirst:
- DirectoryScanner: non-recursive listing of a directory's regular files
- PrefixKeyExtractor / XXHashKeyExtractor: grouping keys from a file's leading bytes
- FileContentReader: full reads, only on key collisions
- DuplicateIndex: key → confirmed-unique paths
- DeduplicationEngine: compare-and-remove pass keeping the first file of each content
- ProgressReporter: console counters

All components are pure Python with no UI dependencies.
"""

from .scanner import DirectoryScanner
from .key_extractor import PrefixKeyExtractor, XXHashKeyExtractor, create_key_extractor
from .reader import FileContentReader
from .index import DuplicateIndex
from .engine import DeduplicationEngine
from .progress import ProgressReporter
from .retry import retry_on_interrupt
from .models import (
    DeduplicationParams, DedupConfig, DeletionMode, KeyScheme, ScanCounters,
    DeduplicationError, ExtractionFailed, ReadFailed, DeletionFailed, ListingFailed)

__all__ = [
    "DirectoryScanner",
    "PrefixKeyExtractor",
    "XXHashKeyExtractor",
    "create_key_extractor",
    "FileContentReader",
    "DuplicateIndex",
    "DeduplicationEngine",
    "ProgressReporter",
    "retry_on_interrupt",
    "DeduplicationParams",
    "DedupConfig",
    "DeletionMode",
    "KeyScheme",
    "ScanCounters",
    "DeduplicationError",
    "ExtractionFailed",
    "ReadFailed",
    "DeletionFailed",
    "ListingFailed",
]
