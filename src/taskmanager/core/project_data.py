"""Aggregate root holding every project and, through them, every task.

All mutations go through :class:`ProjectData`; callers never edit
``Project.tasks`` directly.  Lookups that miss raise the matching
:class:`~taskmanager.exceptions.NotFoundError` subclass so the caller
can tell which entity was absent.
"""

from __future__ import annotations

from collections.abc import Iterable

from taskmanager.core.identifiers import Identifier
from taskmanager.core.models import Project, Task
from taskmanager.exceptions import ProjectNotFoundError, TaskNotFoundError


class ProjectData:
    """In-memory collection of projects keyed by identifier.

    Iteration order is insertion order (projects loaded from disk keep
    the order they had in the file).
    """

    def __init__(self, projects: Iterable[Project] = ()) -> None:
        self._projects: dict[Identifier, Project] = {p.id: p for p in projects}

    def __len__(self) -> int:
        return len(self._projects)

    def __contains__(self, project_id: object) -> bool:
        return project_id in self._projects

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectData):
            return NotImplemented
        return self._projects == other._projects

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def get_project(self, project_id: Identifier) -> Project:
        try:
            return self._projects[project_id]
        except KeyError:
            raise ProjectNotFoundError(project_id) from None

    def list_projects(self) -> list[Project]:
        return list(self._projects.values())

    def create_project(self, name: str, description: str = "") -> Identifier:
        project = Project.create(name, description)
        self._projects[project.id] = project
        return project.id

    def destroy_project(self, project_id: Identifier) -> None:
        """Remove a project together with all of its tasks."""
        if self._projects.pop(project_id, None) is None:
            raise ProjectNotFoundError(project_id)

    def update_project(
        self,
        project_id: Identifier,
        name: str | None = None,
        description: str | None = None,
    ) -> None:
        """Patch the supplied fields; ``None`` leaves a field unchanged."""
        project = self.get_project(project_id)
        if name is not None:
            project.name = name
        if description is not None:
            project.description = description

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def get_task(self, project_id: Identifier, task_id: Identifier) -> Task:
        project = self.get_project(project_id)
        try:
            return project.tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def list_tasks(self, project_id: Identifier) -> list[Task]:
        return list(self.get_project(project_id).tasks.values())

    def create_task(
        self,
        project_id: Identifier,
        name: str,
        description: str = "",
    ) -> Identifier:
        project = self.get_project(project_id)
        # Type and status are not user-settable at creation.
        task = Task.create(name, description, "default", "todo")
        project.tasks[task.id] = task
        return task.id

    def destroy_task(self, project_id: Identifier, task_id: Identifier) -> None:
        project = self.get_project(project_id)
        if project.tasks.pop(task_id, None) is None:
            raise TaskNotFoundError(task_id)

    def update_task(
        self,
        project_id: Identifier,
        task_id: Identifier,
        name: str | None = None,
        description: str | None = None,
    ) -> None:
        """Patch the supplied fields; ``None`` leaves a field unchanged."""
        task = self.get_task(project_id, task_id)
        if name is not None:
            task.name = name
        if description is not None:
            task.description = description
