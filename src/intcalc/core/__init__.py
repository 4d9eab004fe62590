"""Core layer — pure arithmetic, operand validation, and report formatting.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from intcalc.core.arithmetic import add, fibonacci, multiply, sum_of_squares
from intcalc.core.models import CalculationRequest, CalculationResult, OperationSpec
from intcalc.core.operations import OPERATIONS, build_request, execute, get_operation
from intcalc.core.report import extract_result

__all__: list[str] = [
    "OPERATIONS",
    "CalculationRequest",
    "CalculationResult",
    "OperationSpec",
    "add",
    "build_request",
    "execute",
    "extract_result",
    "fibonacci",
    "get_operation",
    "multiply",
    "sum_of_squares",
]
