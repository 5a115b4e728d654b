"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
In-memory index of confirmed-unique files, bucketed by grouping key.
"""

from typing import Dict, List, Optional, Iterator

from keepfirst.core.models import GroupingKey


class DuplicateIndex:
    """
    Maps a grouping key to the ordered list of unique paths seen with that key.

    The first path registered for a content stays the representative: buckets are
    only ever appended to, never reordered or pruned. The index lives for one run.
    """

    def __init__(self, capacity_hint: int = 0):
        # dict cannot be pre-sized; the hint is kept for reporting only
        self.capacity_hint = max(0, capacity_hint)
        self._buckets: Dict[GroupingKey, List[str]] = {}

    def get(self, key: GroupingKey) -> Optional[List[str]]:
        """Returns the live bucket for key, or None if the key is unseen."""
        return self._buckets.get(key)

    def add_bucket(self, key: GroupingKey, path: str) -> None:
        if key in self._buckets:
            raise KeyError(f"Bucket for key {key} already exists")
        self._buckets[key] = [path]

    def append(self, key: GroupingKey, path: str) -> None:
        self._buckets[key].append(path)

    def paths(self) -> Iterator[str]:
        """All indexed paths, bucket by bucket, in insertion order."""
        for bucket in self._buckets.values():
            yield from bucket

    def __contains__(self, key: GroupingKey) -> bool:
        return key in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self):
        return f"<DuplicateIndex buckets={len(self._buckets)}, capacity_hint={self.capacity_hint}>"
