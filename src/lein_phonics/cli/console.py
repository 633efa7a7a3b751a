"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that bootstrap paths
(``--help``, ``--version``) and plain encoding keep working when Rich is
not installed.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from lein_phonics.exceptions import DependencyMissingError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``DependencyMissingError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DependencyMissingError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


def escape(text: str) -> str:
    """Escape Rich markup in *text*; unchanged when Rich is missing.

    Plain-print fallback never interprets markup, so nothing needs
    escaping there.
    """
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def _stream(self) -> TextIO:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except DependencyMissingError:
            print(*objects, file=self._stream())
            return
        rich_console.print(*objects, markup=markup)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, errors and hints."""

output = _ConsoleProxy(stderr=False)
"""Command results, kept on stdout so they can be piped."""
