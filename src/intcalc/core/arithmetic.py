"""Pure integer arithmetic with native-width overflow semantics.

Python integers never overflow, so every function here reduces its
result to the two's complement width a compiled ``int`` / ``long long``
would produce.  Nothing in this module reads input or writes output.
"""

from __future__ import annotations

from collections.abc import Iterable

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


# ---------------------------------------------------------------------------
# Width reduction
# ---------------------------------------------------------------------------

def _wrap(value: int, bits: int) -> int:
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def wrap_int32(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer (wraparound)."""
    return _wrap(value, 32)


def wrap_int64(value: int) -> int:
    """Reduce *value* to a signed 64-bit integer (wraparound)."""
    return _wrap(value, 64)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def add(a: int, b: int) -> int:
    """Return ``a + b`` with 32-bit wraparound."""
    return wrap_int32(a + b)


def multiply(a: int, b: int) -> int:
    """Return ``a * b`` in 64-bit precision.

    The product of two 32-bit operands always fits in 64 bits.
    """
    return wrap_int64(a * b)


def fibonacci(n: int) -> int:
    """Return the *n*-th Fibonacci number (``F(0) = 0``, ``F(1) = 1``).

    Iterative, O(n) time and O(1) space.  Each step wraps to 64 bits, so
    terms past ``F(92)`` follow ``long long`` overflow.  Non-positive
    *n* yields ``0``; rejecting negative positions is the caller's job.
    """
    if n <= 0:
        return 0
    if n == 1:
        return 1

    prev, curr = 0, 1
    for _ in range(2, n + 1):
        prev, curr = curr, wrap_int64(prev + curr)
    return curr


def sum_of_squares(values: Iterable[int]) -> int:
    """Return the 64-bit sum of each value squared; ``0`` when empty."""
    total = 0
    for value in values:
        total = wrap_int64(total + value * value)
    return total
