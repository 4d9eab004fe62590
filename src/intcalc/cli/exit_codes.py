"""Process exit statuses for ``intcalc``.

For a calculation, ``SUCCESS`` is returned only after the ``RESULT:``
line has been written; ``--help`` and ``--version`` also exit with it.
"""

from __future__ import annotations

SUCCESS: int = 0
"""A ``RESULT:`` line, the timing line and the success marker were printed."""

GENERAL_ERROR: int = 1
"""Rejected input; an ``Error:`` line was printed and nothing was computed."""

UNEXPECTED_ERROR: int = 2
"""A bug: something other than a ``CalculatorError`` escaped ``main``."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
