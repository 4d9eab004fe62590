"""Operand parsing and range validation.

Pure functions — no I/O.  Failures are raised as
:class:`~intcalc.exceptions.ParseError` or
:class:`~intcalc.exceptions.RangeError`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from intcalc.core.arithmetic import INT32_MAX, INT32_MIN
from intcalc.exceptions import ParseError, RangeError

# ``int()`` alone would also accept underscores and non-ASCII digits.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_operand(text: str) -> int:
    """Parse *text* as a signed base-10 integer within 32-bit range.

    Raises
    ------
    ParseError
        When *text* is not an optionally signed run of ASCII digits.
    RangeError
        When the value does not fit in a signed 32-bit integer.
    """
    candidate = text.strip()
    if not INTEGER_PATTERN.fullmatch(candidate):
        raise ParseError(
            "Invalid number format",
            hint=f"'{text}' is not an integer.",
        )

    value = int(candidate)
    if not INT32_MIN <= value <= INT32_MAX:
        raise RangeError(
            "Number out of range",
            hint=f"{value} is outside [{INT32_MIN}, {INT32_MAX}].",
        )
    return value


def parse_operands(texts: Iterable[str]) -> tuple[int, ...]:
    """Parse every text in order, failing on the first bad one."""
    return tuple(parse_operand(text) for text in texts)
