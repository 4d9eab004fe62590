"""CLI application entry point and command routing for intcalc.

This module is the **sole error boundary** for the entire application.
It catches :class:`~intcalc.exceptions.CalculatorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No arithmetic lives here — validation and computation are delegated
  to :mod:`intcalc.core`.
* ``print()`` is forbidden outside the console proxy.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import NoReturn

from intcalc.cli import exit_codes
from intcalc.cli.console import console
from intcalc.core.operations import OPERATIONS, build_request, describe, execute
from intcalc.core.report import format_diagnostic, format_elapsed, format_result_line
from intcalc.exceptions import CalculatorError, UsageError
from intcalc.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports bad command lines as :class:`UsageError`.

    argparse would otherwise print its own message and exit with 2.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _operations_epilog() -> str:
    lines = ["Operations:"]
    for spec in OPERATIONS.values():
        lines.append(f"  {spec.name + ' ' + spec.synopsis:<22} - {spec.summary}")
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Options are only recognised before the operation name.  Everything
    after it is collected verbatim as operands, so ``add 2 -h`` reaches
    operand parsing instead of printing help.
    """
    parser = _ArgumentParser(
        prog="intcalc",
        usage="%(prog)s <operation> <number1> [number2] [number3...]",
        description="Integer arithmetic from the command line.",
        epilog=_operations_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "operation",
        nargs="?",
        default=None,
        help="One of: " + ", ".join(OPERATIONS) + ".",
    )
    parser.add_argument(
        "numbers",
        nargs=argparse.REMAINDER,
        help="Integer operands (32-bit signed).",
    )
    return parser


def usage_text() -> str:
    """Return the full usage text printed alongside usage errors."""
    return _build_parser().format_help().rstrip()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run one calculation.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    CalculatorError
        For every validation failure; nothing has been computed or
        reported as a result when this propagates.
    """
    started = time.perf_counter()

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.operation is None or not args.numbers:
        raise UsageError("An operation and at least one number are required.")

    console.line(format_diagnostic("Starting calculation..."))
    console.line(format_diagnostic(f"Operation: {args.operation}"))

    request = build_request(args.operation, args.numbers)

    if request.operation.max_operands is None:
        numbers = " ".join(str(value) for value in request.operands)
        console.line(format_diagnostic(f"Numbers: {numbers}"))
    console.line(format_diagnostic(f"Calculating: {describe(request)}"))

    result = execute(request)
    console.line(format_result_line(result.value))

    elapsed = time.perf_counter() - started
    console.line(format_diagnostic(f"Execution time: {format_elapsed(elapsed)}"))
    console.line(format_diagnostic("Calculation completed successfully!"))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except CalculatorError as exc:
        console.error(str(exc), hint=exc.hint)
        if exc.shows_usage:
            console.line(usage_text())
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.line("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            "Unexpected error. Please report this issue.",
            hint=f"{type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
