"""
Tests for formatter.py - 金額フォーマッター
"""
from decimal import Decimal

import pytest

from kansuji.core.formatter import format_number, format_with_place_markers


class TestFormatWithPlaceMarkers:

    @pytest.mark.parametrize("n, expected", [
        (0, "0"),
        (7, "7"),
        (1234, "1,234"),
        (10000, "1万"),
        (15000, "1万5,000"),
        (100000000, "1億"),
        (123456789, "1億2,345万6,789"),
        (328000000, "3億2,800万"),
        (10 ** 12, "1兆"),
        (10 ** 12 + 1, "1兆1"),
    ])
    def test_values(self, n, expected):
        assert format_with_place_markers(n) == expected

    def test_zero_chunks_skipped(self):
        """値が0のまとまりは「0万」として出さない"""
        assert "0万" not in format_with_place_markers(100000001)
        assert format_with_place_markers(100000001) == "1億1"

    def test_above_cho_stays_in_cho_chunk(self):
        assert format_with_place_markers(10 ** 16) == "10,000兆"


class TestFormatNumber:

    def test_integer_uses_place_markers(self):
        assert format_number(15000) == "1万5,000"

    def test_decimal_uses_plain_grouping(self):
        assert format_number(Decimal("1234.5")) == "1,234.5"
