"""CLI console helpers.

Command output goes to stdout through :data:`console`; errors, hints
and log records go to stderr through :data:`err_console`.  Rich
consoles are created on each call so they always bind to the current
``sys.stdout`` / ``sys.stderr`` (pytest's ``capsys`` relies on this).
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console(*, stderr: bool = False) -> Console:
    """Create a Rich console targeting stdout, or stderr when asked."""
    return Console(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy over a fresh Rich console."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        get_rich_console(stderr=self._stderr).print(*objects)


console = _ConsoleProxy(stderr=False)
err_console = _ConsoleProxy(stderr=True)
