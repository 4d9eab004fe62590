"""Custom exception hierarchy for intcalc.

Every failure that can end an invocation is a subclass of
:class:`CalculatorError`.  Core code raises them; only the CLI error
boundary (:func:`intcalc.cli.app.cli`) catches them and turns them into
an ``Error:`` line and a non-zero exit status.

Hierarchy
---------
CalculatorError
├── UsageError
├── UnknownOperationError
├── InvalidOperandError
│   ├── ArgumentCountError
│   ├── ParseError
│   ├── RangeError
│   └── DomainError
└── MissingDependencyError
"""

from __future__ import annotations

from typing import ClassVar


class CalculatorError(Exception):
    """Base exception for all intcalc errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    shows_usage: ClassVar[bool] = False
    """Whether the CLI should print the usage text after the message."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line shape ----------------------------------------------------

class UsageError(CalculatorError):
    """Raised when the command line is too short or malformed."""

    shows_usage = True


class UnknownOperationError(CalculatorError):
    """Raised when the operation name is not one of the known operations."""

    shows_usage = True

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown operation '{name}'")
        self.name: str = name


# --- Operands --------------------------------------------------------------

class InvalidOperandError(CalculatorError):
    """Common parent for operand count, format, range and domain failures."""


class ArgumentCountError(InvalidOperandError):
    """Raised when an operation receives the wrong number of operands."""


class ParseError(InvalidOperandError):
    """Raised when an argument is not a base-10 integer."""


class RangeError(InvalidOperandError):
    """Raised when an integer falls outside the native 32-bit range."""


class DomainError(InvalidOperandError):
    """Raised when an operand is an integer but invalid for the operation."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(CalculatorError):
    """Raised when an optional runtime dependency cannot be imported."""
