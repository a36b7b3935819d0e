"""Command values and the executor that applies them.

Each command is a frozen dataclass describing exactly one operation on
:class:`~taskmanager.core.project_data.ProjectData` or on the
configuration.  The CLI layer builds these from parsed arguments; the
:class:`CommandExecutor` routes each one to a single domain call.

``mutating`` marks commands whose success must be followed by a save.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from taskmanager.core.identifiers import Identifier
from taskmanager.core.models import Config
from taskmanager.core.project_data import ProjectData

PERSISTENCE_MODE_KEY = "persistence_mode"


# ---------------------------------------------------------------------------
# Project namespace
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CreateProject:
    name: str
    description: str = ""

    mutating: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class DestroyProject:
    project_id: Identifier

    mutating: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class UpdateProject:
    project_id: Identifier
    name: str | None = None
    description: str | None = None

    mutating: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class ListProjects:
    mutating: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class CreateTask:
    project_id: Identifier
    name: str
    description: str = ""

    mutating: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class DestroyTask:
    project_id: Identifier
    task_id: Identifier

    mutating: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class UpdateTask:
    project_id: Identifier
    task_id: Identifier
    name: str | None = None
    description: str | None = None

    mutating: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class ListTasks:
    project_id: Identifier

    mutating: ClassVar[bool] = False


# ---------------------------------------------------------------------------
# Config namespace
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GetConfig:
    key: str

    mutating: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class SetConfig:
    key: str
    value: str

    # Acknowledged only; configuration is never written.
    mutating: ClassVar[bool] = False


Command = (
    CreateProject
    | DestroyProject
    | UpdateProject
    | ListProjects
    | CreateTask
    | DestroyTask
    | UpdateTask
    | ListTasks
    | GetConfig
    | SetConfig
)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConfigEntry:
    """Result of ``config get``.  ``value`` is ``None`` for unknown keys."""

    key: str
    value: str | None


@dataclass(frozen=True, slots=True)
class ConfigAcknowledgement:
    """Result of ``config set``."""

    key: str
    value: str


# ---------------------------------------------------------------------------
# Executor
# ---------------------------------------------------------------------------

class CommandExecutor:
    """Apply one command to the loaded state.

    Parameters
    ----------
    data:
        The project collection to query or mutate in place.
    config:
        The configuration loaded for this run.
    """

    def __init__(self, data: ProjectData, config: Config) -> None:
        self._data = data
        self._config = config
        self._handlers: dict[type, Callable[[Any], Any]] = {
            CreateProject: self._create_project,
            DestroyProject: self._destroy_project,
            UpdateProject: self._update_project,
            ListProjects: self._list_projects,
            CreateTask: self._create_task,
            DestroyTask: self._destroy_task,
            UpdateTask: self._update_task,
            ListTasks: self._list_tasks,
            GetConfig: self._get_config,
            SetConfig: self._set_config,
        }

    def execute(self, command: Command) -> Any:
        """Run *command* and return the operation's result.

        Raises
        ------
        TypeError
            When *command* is not one of the known command types.
        NotFoundError
            When a referenced project or task does not exist.
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {command!r}")
        return handler(command)

    # ------------------------------------------------------------------
    # Project handlers
    # ------------------------------------------------------------------

    def _create_project(self, cmd: CreateProject) -> Identifier:
        return self._data.create_project(cmd.name, cmd.description)

    def _destroy_project(self, cmd: DestroyProject) -> None:
        self._data.destroy_project(cmd.project_id)

    def _update_project(self, cmd: UpdateProject) -> None:
        self._data.update_project(cmd.project_id, cmd.name, cmd.description)

    def _list_projects(self, _cmd: ListProjects) -> list:
        return self._data.list_projects()

    def _create_task(self, cmd: CreateTask) -> Identifier:
        return self._data.create_task(cmd.project_id, cmd.name, cmd.description)

    def _destroy_task(self, cmd: DestroyTask) -> None:
        self._data.destroy_task(cmd.project_id, cmd.task_id)

    def _update_task(self, cmd: UpdateTask) -> None:
        self._data.update_task(cmd.project_id, cmd.task_id, cmd.name, cmd.description)

    def _list_tasks(self, cmd: ListTasks) -> list:
        return self._data.list_tasks(cmd.project_id)

    # ------------------------------------------------------------------
    # Config handlers
    # ------------------------------------------------------------------

    def _get_config(self, cmd: GetConfig) -> ConfigEntry:
        if cmd.key == PERSISTENCE_MODE_KEY:
            return ConfigEntry(cmd.key, self._config.persistence_mode.value)
        return ConfigEntry(cmd.key, None)

    def _set_config(self, cmd: SetConfig) -> ConfigAcknowledgement:
        return ConfigAcknowledgement(cmd.key, cmd.value)
