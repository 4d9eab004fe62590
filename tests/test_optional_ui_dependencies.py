"""Regression tests for the optional Rich dependency.

The calculator must produce identical report lines, and render errors
cleanly, when Rich cannot be imported.
"""

from __future__ import annotations

import pytest

from intcalc.cli import exit_codes
from intcalc.cli.app import cli, main
from intcalc.cli.console import get_rich_console
from intcalc.exceptions import MissingDependencyError


def test_console_loader_raises_when_rich_missing(no_rich: None) -> None:
    with pytest.raises(MissingDependencyError, match="rich is not installed"):
        get_rich_console()


def test_result_without_rich(no_rich: None, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["squares", "3", "4"]) == exit_codes.SUCCESS
    out = capsys.readouterr().out
    assert "RESULT: 25\n" in out
    assert "[intcalc] Numbers: 3 4" in out


def test_error_without_rich(no_rich: None, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli(["add", "2", "three"])
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    out = capsys.readouterr().out
    assert "Error: Invalid number format" in out
    assert "Hint: 'three' is not an integer." in out


def test_version_without_rich(no_rich: None) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_plain_and_rich_report_lines_match(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["multiply", "6", "7"])
    with_rich = capsys.readouterr().out.splitlines()

    import sys

    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    main(["multiply", "6", "7"])
    plain = capsys.readouterr().out.splitlines()

    timing = "Execution time"
    assert [line for line in with_rich if timing not in line] == [
        line for line in plain if timing not in line
    ]
