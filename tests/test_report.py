"""Tests for report formatting and result extraction (core/report.py)."""

from __future__ import annotations

import pytest

from intcalc.core.report import (
    RESULT_PREFIX,
    extract_result,
    format_diagnostic,
    format_elapsed,
    format_result_line,
)
from intcalc.exceptions import ParseError


class TestFormatting:
    def test_result_line(self) -> None:
        assert format_result_line(-40) == "RESULT: -40"

    def test_diagnostic_never_looks_like_result(self) -> None:
        assert not format_diagnostic("RESULT: 1").startswith(RESULT_PREFIX)

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0.0, "0.000ms"), (0.000042, "0.042ms"), (1.5, "1500.000ms")],
    )
    def test_elapsed(self, seconds: float, expected: str) -> None:
        assert format_elapsed(seconds) == expected


class TestExtractResult:
    def test_finds_result_among_diagnostics(self) -> None:
        output = "\n".join(
            [
                "[intcalc] Starting calculation...",
                "[intcalc] Operation: add",
                "RESULT: 40",
                "[intcalc] Execution time: 0.012ms",
            ]
        )
        assert extract_result(output) == 40

    def test_negative_value(self) -> None:
        assert extract_result("RESULT: -9223372036854775808\n") == -(2**63)

    def test_missing_result_line(self) -> None:
        assert extract_result("Error: Invalid number format\n") is None

    def test_prefix_must_start_the_line(self) -> None:
        assert extract_result("[intcalc] RESULT: 3") is None

    @pytest.mark.parametrize("payload", ["many", "1_000", "\u0663", "1.5", ""])
    def test_malformed_payload(self, payload: str) -> None:
        with pytest.raises(ParseError, match="Malformed result line"):
            extract_result(f"RESULT: {payload}")
