"""Custom exception hierarchy for taskmanager.

All exceptions that cross layer boundaries must inherit from
:class:`TaskManagerError`.  Raw ``OSError`` / ``json`` exceptions must
NEVER propagate beyond the infrastructure layer — they must be caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
TaskManagerError
├── InvalidIdentifierError
├── NotFoundError
│   ├── ProjectNotFoundError
│   └── TaskNotFoundError
├── CorruptStoreError
├── PersistenceError
└── EnvironmentError
"""

from __future__ import annotations

from typing import Any


class TaskManagerError(Exception):
    """Base exception for all taskmanager errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Identifiers -----------------------------------------------------------

class InvalidIdentifierError(TaskManagerError):
    """Raised when a string is not a syntactically valid identifier."""


# --- Lookups ---------------------------------------------------------------

class NotFoundError(TaskManagerError):
    """Raised when a referenced project or task does not exist.

    Attributes
    ----------
    entity:
        ``"project"`` or ``"task"`` — which kind of record was missing.
    identifier:
        The identifier that failed to resolve.
    """

    entity: str = "record"

    def __init__(self, identifier: Any, *, hint: str | None = None) -> None:
        super().__init__(f"{self.entity.capitalize()} not found: {identifier}", hint=hint)
        self.identifier = identifier


class ProjectNotFoundError(NotFoundError):
    """Raised when a project identifier does not resolve."""

    entity = "project"

    def __init__(self, identifier: Any) -> None:
        super().__init__(identifier, hint="Run 'taskmanager project list' to see project ids.")


class TaskNotFoundError(NotFoundError):
    """Raised when a task identifier does not resolve inside its project."""

    entity = "task"

    def __init__(self, identifier: Any) -> None:
        super().__init__(
            identifier,
            hint="Run 'taskmanager project list-tasks <project_id>' to see task ids.",
        )


# --- Persistence -----------------------------------------------------------

class CorruptStoreError(TaskManagerError):
    """Raised when a persisted file exists but cannot be parsed."""


class PersistenceError(TaskManagerError):
    """Raised on I/O failure while reading or writing persisted state."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TaskManagerError):
    """Raised when a required runtime dependency is not available."""
