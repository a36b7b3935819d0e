"""Interactive confirmation prompts for destructive commands.

questionary is imported lazily so non-interactive runs (scripts, tests,
``--help``) never load it.
"""

from __future__ import annotations

import sys
from typing import Any

from taskmanager.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def is_interactive() -> bool:
    """Return ``True`` when stdin is attached to a terminal."""
    return sys.stdin.isatty()


def confirm_destroy_project(name: str, task_count: int) -> bool:
    """Ask the user to confirm removing a project and its tasks.

    Returns
    -------
    bool
        ``True`` to proceed.  Ctrl+C / Esc count as "no".
    """
    questionary = _import_questionary()

    noun = "task" if task_count == 1 else "tasks"
    answer: bool | None = questionary.confirm(
        f"Destroy project '{name}' and its {task_count} {noun}?",
        default=False,
    ).ask()  # Returns None on Ctrl+C / Esc
    return bool(answer)
