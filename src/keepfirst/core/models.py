"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models, configuration and error types for single-directory deduplication.
"""

import struct
import sys
from dataclasses import dataclass
from enum import Enum

GroupingKey = int


# =============================
# Enums
# =============================

class KeyScheme(Enum):
    """
    How the grouping key is derived from a file's leading bytes.
    """
    PREFIX = "prefix"
    XXHASH = "xxhash"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            KeyScheme.PREFIX: "Raw prefix",
            KeyScheme.XXHASH: "xxHash64 of prefix",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class DeletionMode(Enum):
    """
    What happens to a confirmed duplicate.
    """
    DELETE = "delete"
    TRASH = "trash"
    DRY_RUN = "dry-run"

    @property
    def display_name(self) -> str:
        mapping = {
            DeletionMode.DELETE: "Delete permanently",
            DeletionMode.TRASH: "Move to trash",
            DeletionMode.DRY_RUN: "Dry run",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# =============================
# Errors
# =============================

class DeduplicationError(Exception):
    """Base class for all deduplication errors."""


class FileError(DeduplicationError):
    """A failure local to one file. The scan continues with the next path."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class ExtractionFailed(FileError):
    """The grouping key could not be read (unreadable or too short)."""


class ReadFailed(FileError):
    """The full content of a file could not be read."""


class DeletionFailed(FileError):
    """A confirmed duplicate could not be removed."""


class ListingFailed(DeduplicationError):
    """The target directory could not be listed. Fatal for the whole run."""


# =============================
# Config
# =============================

class DedupConfig:
    # Width of a native machine word, 8 bytes on 64-bit targets
    DEFAULT_KEY_WIDTH = struct.calcsize("P")
    BYTE_ORDER = sys.byteorder


# ======================
#  Core Data Models
# ======================

@dataclass
class ScanCounters:
    """
    Running totals for one deduplication pass.
    Only ever incremented; a new engine starts from zero.
    """
    scanned: int = 0
    deleted: int = 0
    bytes_freed: int = 0

    def __repr__(self):
        return f"<ScanCounters scanned={self.scanned}, deleted={self.deleted}>"


@dataclass
class DeduplicationParams:
    """Parameters for a deduplication run with validation."""
    root_dir: str
    key_width: int = DedupConfig.DEFAULT_KEY_WIDTH
    key_scheme: KeyScheme = KeyScheme.PREFIX
    deletion_mode: DeletionMode = DeletionMode.DELETE
    sort_entries: bool = True

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if self.root_dir is None:
            raise ValueError("Root directory cannot be None")

        if isinstance(self.key_width, bool) or not isinstance(self.key_width, int):
            raise ValueError(f"Key width must be an integer, got {self.key_width!r}")

        if self.key_width <= 0:
            raise ValueError("Key width must be a positive number of bytes")

        if not isinstance(self.key_scheme, KeyScheme):
            self.key_scheme = KeyScheme(self.key_scheme)

        if not isinstance(self.deletion_mode, DeletionMode):
            self.deletion_mode = DeletionMode(self.deletion_mode)

    @property
    def dry_run(self) -> bool:
        return self.deletion_mode == DeletionMode.DRY_RUN
