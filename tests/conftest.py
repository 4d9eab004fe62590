"""Shared pytest fixtures and configuration for the intcalc test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests capture stdout with ``capsys``; nothing touches the filesystem.
"""

from __future__ import annotations

import sys

import pytest


@pytest.fixture
def no_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail for the duration of a test."""
    for name in ("rich", "rich.console", "rich.text"):
        monkeypatch.setitem(sys.modules, name, None)
