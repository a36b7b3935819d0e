"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from taskmanager.core.commands import CommandExecutor
from taskmanager.core.identifiers import Identifier, new_id, parse_id
from taskmanager.core.models import Config, PersistenceMode, Project, Task, TaskStatus, TaskType
from taskmanager.core.project_data import ProjectData
from taskmanager.core.protocols import ConfigStore, ProjectStore
from taskmanager.core.session import Session

__all__: list[str] = [
    "CommandExecutor",
    "Config",
    "ConfigStore",
    "Identifier",
    "PersistenceMode",
    "Project",
    "ProjectData",
    "ProjectStore",
    "Session",
    "Task",
    "TaskStatus",
    "TaskType",
    "new_id",
    "parse_id",
]
