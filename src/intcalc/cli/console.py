"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so the
calculator keeps working, with identical plain-text output, when Rich
is not installed.  All output goes to stdout: callers of the tool read
the ``RESULT:`` line and the ``Error:`` line from the same stream.
"""

from __future__ import annotations

from typing import Any

from intcalc.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console targeting stdout.

    Highlighting and emoji codes are disabled and soft wrapping is on,
    so report lines are written exactly as formatted.
    """
    console_class = _load_rich_console_class()
    return console_class(highlight=False, emoji=False, soft_wrap=True)


class _ConsoleProxy:
    """Line-oriented output proxy with plain ``print`` fallback."""

    def line(self, text: str) -> None:
        """Write *text* verbatim (no markup interpretation)."""
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(text)
            return
        rich_console.print(text, markup=False)

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Render an ``Error:`` line and an optional ``Hint:`` line."""
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(f"Error: {message}")
            if hint:
                print(f"Hint: {hint}")
            return

        from rich.text import Text

        rich_console.print(Text.assemble(("Error:", "bold red"), " ", message))
        if hint:
            rich_console.print(Text.assemble(("Hint:", "yellow"), " ", hint))


console = _ConsoleProxy()
