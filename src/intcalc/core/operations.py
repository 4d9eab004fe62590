"""Operation registry, request validation, and execution.

:func:`build_request` performs every check — operation name, operand
count, integer format, range, and domain — before anything is
computed, so a failing invocation never produces a partial result.
"""

from __future__ import annotations

from collections.abc import Sequence

from intcalc.core import arithmetic
from intcalc.core.models import (
    CalculationRequest,
    CalculationResult,
    Operands,
    OperationSpec,
)
from intcalc.core.operands import parse_operands
from intcalc.exceptions import (
    ArgumentCountError,
    DomainError,
    UnknownOperationError,
)


def _check_fibonacci(operands: Operands) -> None:
    if operands[0] < 0:
        raise DomainError("Fibonacci position must be non-negative")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

OPERATIONS: dict[str, OperationSpec] = {
    spec.name: spec
    for spec in (
        OperationSpec(
            name="add",
            synopsis="<a> <b>",
            summary="Addition: a + b",
            min_operands=2,
            max_operands=2,
            compute=lambda ops: arithmetic.add(*ops),
            describe=lambda ops: f"{ops[0]} + {ops[1]}",
        ),
        OperationSpec(
            name="multiply",
            synopsis="<a> <b>",
            summary="Multiplication: a * b",
            min_operands=2,
            max_operands=2,
            compute=lambda ops: arithmetic.multiply(*ops),
            describe=lambda ops: f"{ops[0]} * {ops[1]}",
        ),
        OperationSpec(
            name="fibonacci",
            synopsis="<n>",
            summary="Fibonacci number at position n",
            min_operands=1,
            max_operands=1,
            compute=lambda ops: arithmetic.fibonacci(ops[0]),
            describe=lambda ops: f"fibonacci({ops[0]})",
            check=_check_fibonacci,
        ),
        OperationSpec(
            name="squares",
            synopsis="<n1> <n2>...",
            summary="Sum of squares of all numbers",
            min_operands=1,
            max_operands=None,
            compute=arithmetic.sum_of_squares,
            describe=lambda ops: "sum of squares of " + " ".join(map(str, ops)),
        ),
    )
}


def get_operation(name: str) -> OperationSpec:
    """Look up *name* in :data:`OPERATIONS`.

    Raises
    ------
    UnknownOperationError
        When *name* is not a registered operation.
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None


# ---------------------------------------------------------------------------
# Validation / execution
# ---------------------------------------------------------------------------

def build_request(name: str, texts: Sequence[str]) -> CalculationRequest:
    """Resolve and validate a raw command line into a request.

    Checks run in a fixed order: operation name, operand count, integer
    parsing (format then range, argument by argument), domain.

    Raises
    ------
    UnknownOperationError, ArgumentCountError, ParseError, RangeError, DomainError
    """
    spec = get_operation(name)
    if not spec.accepts(len(texts)):
        raise ArgumentCountError(
            f"{spec.name.capitalize()} operation requires {spec.arity_text}",
            hint=f"Usage: {spec.name} {spec.synopsis}",
        )

    operands = parse_operands(texts)
    if spec.check is not None:
        spec.check(operands)
    return CalculationRequest(operation=spec, operands=operands)


def describe(request: CalculationRequest) -> str:
    """Return the trace text for *request* (e.g. ``2 + 3``)."""
    return request.operation.describe(request.operands)


def execute(request: CalculationRequest) -> CalculationResult:
    """Run the engine function for an already validated *request*."""
    value = request.operation.compute(request.operands)
    return CalculationResult(
        request=request,
        value=value,
        description=describe(request),
    )
