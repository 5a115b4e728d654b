"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/key_extractor.py
Derives the grouping key of a file from its first `width` bytes.

Two schemes are available:
- PrefixKeyExtractor: the raw prefix decoded as a native-endian unsigned integer (default)
- XXHashKeyExtractor: the xxHash64 digest of the same prefix, as an unsigned integer

Both refuse files shorter than `width` bytes: a short file is never padded.
"""

import logging
from typing import Optional

import xxhash

from keepfirst.core.models import (
    DedupConfig, ExtractionFailed, GroupingKey, KeyScheme,
)
from keepfirst.core.retry import retry_on_interrupt

logger = logging.getLogger(__name__)


def read_prefix(path: str, width: int) -> bytes:
    """
    Reads exactly `width` bytes from the start of the file.

    Raises:
        ExtractionFailed: If the file cannot be opened or read, or is shorter than `width`.
    """
    buf = bytearray()
    try:
        with retry_on_interrupt(open, path, "rb") as f:
            while len(buf) < width:
                chunk = retry_on_interrupt(f.read, width - len(buf))
                if not chunk:
                    break
                buf.extend(chunk)
    except OSError as e:
        raise ExtractionFailed(path, f"Cannot read key from {path}: {e}") from e

    if len(buf) < width:
        raise ExtractionFailed(
            path, f"File {path} is shorter than key width ({len(buf)} < {width} bytes)"
        )
    return bytes(buf)


class PrefixKeyExtractor:
    """
    Interprets the first `width` bytes as an unsigned integer in native byte order.
    Not a hash: files with equal leading bytes always share a key.
    """

    def __init__(self, width: int = DedupConfig.DEFAULT_KEY_WIDTH,
                 byteorder: str = DedupConfig.BYTE_ORDER):
        if width <= 0:
            raise ValueError("Key width must be a positive number of bytes")
        self.width = width
        self.byteorder = byteorder

    def extract(self, path: str) -> GroupingKey:
        prefix = read_prefix(path, self.width)
        return int.from_bytes(prefix, self.byteorder, signed=False)


class XXHashKeyExtractor:
    """
    Hashes the first `width` bytes with xxHash64.
    Useful with a large width: distinct prefixes collide far less often than
    raw keys of a few bytes, while the index stays keyed by a 64-bit integer.
    """

    def __init__(self, width: int = DedupConfig.DEFAULT_KEY_WIDTH, seed: int = 0):
        if width <= 0:
            raise ValueError("Key width must be a positive number of bytes")
        self.width = width
        self.seed = seed

    def extract(self, path: str) -> GroupingKey:
        prefix = read_prefix(path, self.width)
        return xxhash.xxh64_intdigest(prefix, seed=self.seed)


def create_key_extractor(scheme: KeyScheme, width: Optional[int] = None):
    """Factory returning the extractor for the given scheme."""
    width = width or DedupConfig.DEFAULT_KEY_WIDTH
    if scheme == KeyScheme.PREFIX:
        return PrefixKeyExtractor(width)
    if scheme == KeyScheme.XXHASH:
        return XXHashKeyExtractor(width)
    raise ValueError(f"Unknown key scheme: {scheme!r}")
