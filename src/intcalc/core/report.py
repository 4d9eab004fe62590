"""Report line formatting and result extraction.

The ``RESULT:`` line is the machine-readable part of the output; every
other line is a diagnostic.  :func:`extract_result` is the inverse used
by calling processes that capture the tool's stdout.
"""

from __future__ import annotations

from intcalc.core.operands import INTEGER_PATTERN
from intcalc.exceptions import ParseError

RESULT_PREFIX: str = "RESULT:"
DIAGNOSTIC_PREFIX: str = "[intcalc]"


def format_result_line(value: int) -> str:
    """Return the result line for *value* (``RESULT: 5``)."""
    return f"{RESULT_PREFIX} {value}"


def format_diagnostic(message: str) -> str:
    """Prefix *message* so it can never be mistaken for a result line."""
    return f"{DIAGNOSTIC_PREFIX} {message}"


def format_elapsed(seconds: float) -> str:
    """Render an elapsed duration in milliseconds, three decimals."""
    return f"{seconds * 1000:.3f}ms"


def extract_result(output: str) -> int | None:
    """Return the value of the first ``RESULT:`` line in *output*.

    Returns ``None`` when *output* has no result line (a failed run).

    Raises
    ------
    ParseError
        When a result line is present but its payload is not an integer.
    """
    for line in output.splitlines():
        if not line.startswith(RESULT_PREFIX):
            continue
        payload = line[len(RESULT_PREFIX):].strip()
        if not INTEGER_PATTERN.fullmatch(payload):
            raise ParseError(f"Malformed result line: {line!r}")
        return int(payload)
    return None
