"""Tests for selector encoding."""

from __future__ import annotations

import pytest

from gmir import selector
from gmir.errors import InternalError


class TestIsComplete:
    def test_single_digit(self) -> None:
        assert selector.is_complete("5")

    def test_leading_zero_waits_for_more(self) -> None:
        assert not selector.is_complete("0")
        assert not selector.is_complete("03")
        assert selector.is_complete("034")

    def test_two_leading_zeros(self) -> None:
        assert not selector.is_complete("0012")
        assert selector.is_complete("00123")

    def test_overlong_selector_never_completes(self) -> None:
        assert not selector.is_complete("0345")
        assert not selector.is_complete("12")

    def test_empty(self) -> None:
        assert not selector.is_complete("")


class TestFromIndex:
    def test_one_digit(self) -> None:
        assert selector.from_index(0) == "1"
        assert selector.from_index(8) == "9"

    def test_two_digits(self) -> None:
        assert selector.from_index(9) == "010"
        assert selector.from_index(33) == "034"
        assert selector.from_index(98) == "099"

    def test_three_digits(self) -> None:
        assert selector.from_index(99) == "00100"

    def test_round_trip(self) -> None:
        for index in (0, 7, 9, 42, 99, 1234):
            encoded = selector.from_index(index)
            assert selector.is_complete(encoded)
            assert selector.to_index(encoded) == index


class TestToIndex:
    def test_decode(self) -> None:
        assert selector.to_index("034") == 33
        assert selector.to_index("1") == 0

    def test_zero_is_invalid(self) -> None:
        with pytest.raises(InternalError):
            selector.to_index("000")

    def test_non_numeric_is_invalid(self) -> None:
        with pytest.raises(InternalError):
            selector.to_index("a")

    def test_empty_is_invalid(self) -> None:
        with pytest.raises(InternalError):
            selector.to_index("")


class TestColumnWidth:
    def test_no_items(self) -> None:
        assert selector.column_width(0) == 0

    def test_single_digit_items(self) -> None:
        assert selector.column_width(1) == 2
        assert selector.column_width(9) == 2

    def test_two_digit_items(self) -> None:
        assert selector.column_width(10) == 4
        assert selector.column_width(99) == 4

    def test_three_digit_items(self) -> None:
        assert selector.column_width(100) == 6
