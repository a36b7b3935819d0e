"""Domain models for taskmanager.

``Project`` and ``Task`` are plain mutable dataclasses: the aggregate
root (:class:`~taskmanager.core.project_data.ProjectData`) patches their
``name`` / ``description`` in place.  Identifiers are never reassigned
after construction.

The categorical tags (:class:`TaskType`, :class:`TaskStatus`,
:class:`PersistenceMode`) are closed enums.  Their ``value`` is the
stored spelling; user input goes through the lenient ``parse``
functions, which never raise.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from taskmanager.core.identifiers import Identifier, new_id


# ---------------------------------------------------------------------------
# Categorical tags
# ---------------------------------------------------------------------------

class TaskType(enum.Enum):
    """Kind of task.  Only one variant exists today."""

    DEFAULT = "Default"

    @classmethod
    def parse(cls, text: str) -> TaskType:
        """Map user input to a variant; anything unrecognised is ``DEFAULT``."""
        return _TASK_TYPE_INPUTS.get(text, cls.DEFAULT)

    @property
    def label(self) -> str:
        return _TASK_TYPE_LABELS[self]


class TaskStatus(enum.Enum):
    """Progress state of a task."""

    DEFAULT = "Default"
    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    COMPLETE = "Complete"

    @classmethod
    def parse(cls, text: str, fallback: TaskStatus | None = None) -> TaskStatus:
        """Map user input to a variant.

        ``"todo"``, ``"in_progress"`` and ``"complete"`` are recognised;
        any other string yields *fallback* (``DEFAULT`` when omitted).
        """
        default = cls.DEFAULT if fallback is None else fallback
        return _TASK_STATUS_INPUTS.get(text, default)

    @property
    def label(self) -> str:
        return _TASK_STATUS_LABELS[self]


_TASK_TYPE_INPUTS: dict[str, TaskType] = {"default": TaskType.DEFAULT}
_TASK_TYPE_LABELS: dict[TaskType, str] = {v: k for k, v in _TASK_TYPE_INPUTS.items()}

_TASK_STATUS_INPUTS: dict[str, TaskStatus] = {
    "todo": TaskStatus.TODO,
    "in_progress": TaskStatus.IN_PROGRESS,
    "complete": TaskStatus.COMPLETE,
}
_TASK_STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.DEFAULT: "default",
    **{v: k for k, v in _TASK_STATUS_INPUTS.items()},
}


class PersistenceMode(enum.Enum):
    """Storage backend selector held in the configuration file."""

    JSON = "JSON"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Task:
    """A unit of work owned by exactly one :class:`Project`."""

    id: Identifier
    name: str
    description: str
    type_: TaskType = TaskType.DEFAULT
    status: TaskStatus = TaskStatus.TODO

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        type_: str = "default",
        status: str = "todo",
    ) -> Task:
        """Build a new task with a fresh identifier.

        Unrecognised *type_* falls back to ``TaskType.DEFAULT``;
        unrecognised *status* falls back to ``TaskStatus.TODO``.
        """
        return cls(
            id=new_id(),
            name=name,
            description=description,
            type_=TaskType.parse(type_),
            status=TaskStatus.parse(status, fallback=TaskStatus.TODO),
        )


@dataclass(slots=True)
class Project:
    """A named collection of tasks."""

    id: Identifier
    name: str
    description: str
    tasks: dict[Identifier, Task] = field(default_factory=dict)

    @classmethod
    def create(cls, name: str, description: str) -> Project:
        """Build an empty project with a fresh identifier."""
        return cls(id=new_id(), name=name, description=description)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Config:
    """Persisted tool configuration.  All fields have defaults."""

    persistence_mode: PersistenceMode = PersistenceMode.JSON
