"""
Tests for DuplicateIndex — bucket bookkeeping for confirmed-unique files.
"""
import pytest

from keepfirst.core.index import DuplicateIndex


class TestDuplicateIndex:

    def test_unknown_key_returns_none(self):
        assert DuplicateIndex().get(42) is None

    def test_add_bucket_then_append_preserves_insertion_order(self):
        index = DuplicateIndex()
        index.add_bucket(7, "/d/first")
        index.append(7, "/d/second")
        index.append(7, "/d/third")

        assert index.get(7) == ["/d/first", "/d/second", "/d/third"]
        assert 7 in index
        assert len(index) == 1

    def test_add_bucket_twice_is_rejected(self):
        """The first path of a key can never be replaced."""
        index = DuplicateIndex()
        index.add_bucket(1, "/d/a")

        with pytest.raises(KeyError):
            index.add_bucket(1, "/d/b")
        assert index.get(1) == ["/d/a"]

    def test_paths_lists_all_buckets(self):
        index = DuplicateIndex()
        index.add_bucket(1, "a")
        index.add_bucket(2, "b")
        index.append(1, "c")

        assert sorted(index.paths()) == ["a", "b", "c"]

    def test_capacity_hint_is_kept(self):
        assert DuplicateIndex(capacity_hint=128).capacity_hint == 128
        assert DuplicateIndex(capacity_hint=-5).capacity_hint == 0
