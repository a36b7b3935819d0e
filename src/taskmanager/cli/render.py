"""Rendering of command results for the CLI layer.

Each command type maps to one renderer that receives the command and
the value returned by :meth:`Session.run`.  All display-related logic
lives here — no business logic, no persistence.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from rich.markup import escape
from rich.table import Table

from taskmanager.cli.console import console
from taskmanager.core.commands import (
    ConfigAcknowledgement,
    ConfigEntry,
    CreateProject,
    CreateTask,
    DestroyProject,
    DestroyTask,
    GetConfig,
    ListProjects,
    ListTasks,
    SetConfig,
    UpdateProject,
    UpdateTask,
)
from taskmanager.core.models import Project, Task


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def _projects_table(projects: Sequence[Project]) -> Table:
    table = Table(
        title="Projects",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Tasks", justify="right")

    for project in projects:
        table.add_row(
            str(project.id),
            escape(project.name),
            escape(project.description),
            str(len(project.tasks)),
        )
    return table


def _tasks_table(tasks: Sequence[Task]) -> Table:
    table = Table(
        title="Project tasks",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Type")
    table.add_column("Status", no_wrap=True)

    for task in tasks:
        table.add_row(
            str(task.id),
            escape(task.name),
            escape(task.description),
            task.type_.label,
            task.status.label,
        )
    return table


# ---------------------------------------------------------------------------
# Per-command renderers
# ---------------------------------------------------------------------------

def _render_create_project(_cmd: CreateProject, project_id: Any) -> None:
    console.print(f"[green]Created project[/green] {project_id}")


def _render_destroy_project(cmd: DestroyProject, _result: Any) -> None:
    console.print(f"Destroyed project {cmd.project_id}")


def _render_update_project(cmd: UpdateProject, _result: Any) -> None:
    console.print(f"Updated project {cmd.project_id}")


def _render_list_projects(_cmd: ListProjects, projects: Sequence[Project]) -> None:
    if not projects:
        console.print("[dim]No projects.[/dim]")
        return
    console.print(_projects_table(projects))


def _render_create_task(_cmd: CreateTask, task_id: Any) -> None:
    console.print(f"[green]Created task[/green] {task_id}")


def _render_destroy_task(cmd: DestroyTask, _result: Any) -> None:
    console.print(f"Destroyed task {cmd.task_id}")


def _render_update_task(cmd: UpdateTask, _result: Any) -> None:
    console.print(f"Updated task {cmd.task_id}")


def _render_list_tasks(_cmd: ListTasks, tasks: Sequence[Task]) -> None:
    if not tasks:
        console.print("[dim]No tasks.[/dim]")
        return
    console.print(_tasks_table(tasks))


def _render_get_config(_cmd: GetConfig, entry: ConfigEntry) -> None:
    if entry.value is None:
        console.print("[yellow]Invalid config key[/yellow]")
        return
    console.print(f"Persistence Mode: {entry.value}")


def _render_set_config(_cmd: SetConfig, ack: ConfigAcknowledgement) -> None:
    console.print(f"Setting config key: {escape(ack.key)} to value: {escape(ack.value)}")


_RENDERERS: dict[type, Callable[[Any, Any], None]] = {
    CreateProject: _render_create_project,
    DestroyProject: _render_destroy_project,
    UpdateProject: _render_update_project,
    ListProjects: _render_list_projects,
    CreateTask: _render_create_task,
    DestroyTask: _render_destroy_task,
    UpdateTask: _render_update_task,
    ListTasks: _render_list_tasks,
    GetConfig: _render_get_config,
    SetConfig: _render_set_config,
}


def render_result(command: Any, result: Any) -> None:
    """Print the outcome of *command* to stdout."""
    _RENDERERS[type(command)](command, result)
