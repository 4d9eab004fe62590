"""Domain models for intcalc.

All models are **frozen** dataclasses — immutable value objects that
live for a single invocation.  They carry zero I/O.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

Operands = tuple[int, ...]


# ---------------------------------------------------------------------------
# Operation descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OperationSpec:
    """A named computation and its operand contract."""

    name: str
    """Command-line name (e.g. ``add``)."""

    synopsis: str
    """Argument synopsis shown in usage text (e.g. ``<a> <b>``)."""

    summary: str
    """One-line description shown in usage text."""

    min_operands: int
    """Fewest operands accepted."""

    max_operands: int | None
    """Most operands accepted, or ``None`` when unbounded."""

    compute: Callable[[Operands], int] = field(repr=False, compare=False)
    """Engine adapter receiving the parsed operands."""

    describe: Callable[[Operands], str] = field(repr=False, compare=False)
    """Render the ``Calculating:`` trace text for the operands."""

    check: Callable[[Operands], None] | None = field(
        default=None, repr=False, compare=False,
    )
    """Optional domain validation run after parsing."""

    def accepts(self, count: int) -> bool:
        """Return whether *count* operands satisfy this operation."""
        if count < self.min_operands:
            return False
        return self.max_operands is None or count <= self.max_operands

    @property
    def arity_text(self) -> str:
        """Human phrase for the operand contract (``exactly 2 numbers``)."""
        if self.max_operands == self.min_operands:
            qualifier = "exactly"
        else:
            qualifier = "at least"
        noun = "number" if self.min_operands == 1 else "numbers"
        return f"{qualifier} {self.min_operands} {noun}"


# ---------------------------------------------------------------------------
# Request / result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CalculationRequest:
    """A validated operation paired with its parsed operands."""

    operation: OperationSpec
    operands: Operands


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Outcome of executing a :class:`CalculationRequest`."""

    request: CalculationRequest
    value: int
    """Signed 64-bit result."""

    description: str
    """Trace text such as ``2 + 3``."""
