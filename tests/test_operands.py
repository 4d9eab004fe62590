"""Tests for operand parsing (core/operands.py)."""

from __future__ import annotations

import pytest

from intcalc.core.operands import parse_operand, parse_operands
from intcalc.exceptions import ParseError, RangeError


class TestParseOperand:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("42", 42),
            ("-7", -7),
            ("+15", 15),
            (" 8 ", 8),
            ("007", 7),
            ("2147483647", 2147483647),
            ("-2147483648", -2147483648),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_operand(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["three", "", "-", "1.5", "12abc", "1_000", "0x10", "1e3", "٣"],
    )
    def test_not_an_integer(self, text: str) -> None:
        with pytest.raises(ParseError, match="Invalid number format"):
            parse_operand(text)

    @pytest.mark.parametrize(
        "text", ["2147483648", "-2147483649", "99999999999999999999"]
    )
    def test_out_of_range(self, text: str) -> None:
        with pytest.raises(RangeError, match="Number out of range"):
            parse_operand(text)

    def test_parse_error_hint_names_argument(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_operand("three")
        assert exc_info.value.hint is not None
        assert "three" in exc_info.value.hint


class TestParseOperands:
    def test_preserves_order(self) -> None:
        assert parse_operands(["3", "-1", "4"]) == (3, -1, 4)

    def test_returns_tuple(self) -> None:
        assert isinstance(parse_operands(["1"]), tuple)

    def test_empty(self) -> None:
        assert parse_operands([]) == ()

    def test_first_failure_wins(self) -> None:
        with pytest.raises(ParseError):
            parse_operands(["1", "x", "99999999999"])
