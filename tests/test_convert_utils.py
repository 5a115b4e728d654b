"""
Tests for ConvertUtils.bytes_to_human — used for the freed-space summary.
"""
import pytest

from keepfirst.utils.convert_utils import ConvertUtils


class TestBytesToHuman:

    @pytest.mark.parametrize("size, expected", [
        (0, "0.00B"),
        (9, "9.00B"),
        (1024, "1.00KB"),
        (1536, "1.50KB"),
        (5 * 1024 ** 2, "5.00MB"),
        (3 * 1024 ** 3, "3.00GB"),
    ])
    def test_formats_sizes(self, size, expected):
        assert ConvertUtils.bytes_to_human(size) == expected

    def test_negative_is_zero(self):
        assert ConvertUtils.bytes_to_human(-1) == "0B"
