"""CLI application entry point and command routing for taskmanager.

This module is the **sole error boundary** for the entire application.
It catches :class:`~taskmanager.exceptions.TaskManagerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — argument values are turned into a
  command object and handed to a :class:`~taskmanager.core.session.Session`.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from taskmanager.cli import exit_codes
from taskmanager.cli.console import console, err_console
from taskmanager.core.commands import (
    Command,
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
from taskmanager.core.identifiers import parse_id
from taskmanager.core.session import Session
from taskmanager.exceptions import TaskManagerError
from taskmanager.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_patch_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name", default=None, help="New name (unchanged when omitted).")
    parser.add_argument(
        "--description",
        default=None,
        help="New description (unchanged when omitted).",
    )


def _build_project_parser(sub: argparse._SubParsersAction) -> None:
    project = sub.add_parser("project", help="Manage projects and their tasks.")
    project.set_defaults(help_parser=project)
    actions = project.add_subparsers(dest="action", metavar="<action>")

    p = actions.add_parser("create", help="Create a project.")
    p.add_argument("name")
    p.add_argument("description", nargs="?", default="")

    p = actions.add_parser("destroy", help="Destroy a project and all of its tasks.")
    p.add_argument("project_id")
    p.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Do not ask for confirmation.",
    )

    p = actions.add_parser("update", help="Update a project's name or description.")
    p.add_argument("project_id")
    _add_patch_options(p)

    actions.add_parser("list", help="List projects.")

    p = actions.add_parser("create-task", help="Create a task inside a project.")
    p.add_argument("project_id")
    p.add_argument("name")
    p.add_argument("description", nargs="?", default="")

    p = actions.add_parser("destroy-task", help="Destroy a task.")
    p.add_argument("project_id")
    p.add_argument("task_id")

    p = actions.add_parser("update-task", help="Update a task's name or description.")
    p.add_argument("project_id")
    p.add_argument("task_id")
    _add_patch_options(p)

    p = actions.add_parser("list-tasks", help="List the tasks of a project.")
    p.add_argument("project_id")


def _build_config_parser(sub: argparse._SubParsersAction) -> None:
    config = sub.add_parser("config", help="Read or write configuration values.")
    config.set_defaults(help_parser=config)
    actions = config.add_subparsers(dest="action", metavar="<action>")

    p = actions.add_parser("get", help="Show a configuration value.")
    p.add_argument("key", help="Configuration key (e.g. persistence_mode).")

    p = actions.add_parser("set", help="Set a configuration value.")
    p.add_argument("key")
    p.add_argument("value")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports two namespaces:
    * ``taskmanager project <action> ...``
    * ``taskmanager config <get|set> ...``
    """
    parser = argparse.ArgumentParser(
        prog="taskmanager",
        description="Manage projects and tasks.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    parser.add_argument(
        "--projects-file",
        default=None,
        help="Projects JSON file (env: TASKMANAGER_PROJECTS_FILE, default: ./projects.json).",
    )
    parser.add_argument(
        "--config-file",
        default=None,
        help="Config JSON file (env: TASKMANAGER_CONFIG_FILE, default: ./config.json).",
    )
    sub = parser.add_subparsers(dest="namespace", metavar="<namespace>")
    _build_project_parser(sub)
    _build_config_parser(sub)
    return parser


# ---------------------------------------------------------------------------
# Command construction
# ---------------------------------------------------------------------------

def _build_command(args: argparse.Namespace) -> Command:
    """Turn parsed arguments into a validated command value.

    Raises
    ------
    InvalidIdentifierError
        When a project or task id argument is malformed.
    """
    if args.namespace == "config":
        if args.action == "get":
            return GetConfig(args.key)
        return SetConfig(args.key, args.value)

    action: str = args.action
    if action == "create":
        return CreateProject(args.name, args.description)
    if action == "list":
        return ListProjects()

    project_id = parse_id(args.project_id)
    if action == "destroy":
        return DestroyProject(project_id)
    if action == "update":
        return UpdateProject(project_id, args.name, args.description)
    if action == "create-task":
        return CreateTask(project_id, args.name, args.description)
    if action == "list-tasks":
        return ListTasks(project_id)

    task_id = parse_id(args.task_id)
    if action == "destroy-task":
        return DestroyTask(project_id, task_id)
    return UpdateTask(project_id, task_id, args.name, args.description)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _open_session(args: argparse.Namespace) -> Session:
    """Resolve file locations and load state for this run."""
    from taskmanager.infra.json_store import JsonConfigStore
    from taskmanager.infra.settings import load_settings
    from taskmanager.infra.store_factory import project_store_resolver

    settings = load_settings(
        projects_file=args.projects_file,
        config_file=args.config_file,
    )
    return Session.open(
        JsonConfigStore(settings.config_file),
        project_store_resolver(settings.projects_file),
    )


def _confirm_destroy(session: Session, command: DestroyProject) -> bool:
    """Ask before destroying a project when running interactively."""
    from taskmanager.cli.prompt import confirm_destroy_project, is_interactive

    if not is_interactive():
        return True
    project = session.data.get_project(command.project_id)
    return confirm_destroy_project(project.name, len(project.tasks))


def _handle_command(args: argparse.Namespace) -> int:
    """Dispatch one command.

    Flow:
    1. Build the command value (validates identifiers).
    2. Load configuration and projects.
    3. Execute; the session saves after a successful mutation.
    4. Render the result.
    """
    from taskmanager.cli.render import render_result

    command = _build_command(args)
    session = _open_session(args)

    if isinstance(command, DestroyProject) and not args.yes:
        if not _confirm_destroy(session, command):
            console.print("[yellow]Aborted.[/yellow] Nothing was changed.")
            return exit_codes.SUCCESS

    result = session.run(command)
    render_result(command, result)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the taskmanager CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.namespace is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.action is None:
        args.help_parser.print_help()
        return exit_codes.SUCCESS

    from taskmanager.logging_setup import setup_logging

    setup_logging(verbose=args.verbose)
    return _handle_command(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TaskManagerError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
