"""JSON file backed implementations of the core storage protocols.

Projects file layout::

    {
      "<project-uuid>": {
        "id": "<project-uuid>",
        "name": "...",
        "description": "...",
        "tasks": {
          "<task-uuid>": {
            "id": "<task-uuid>",
            "name": "...",
            "description": "...",
            "type_": "Default",
            "status": "Todo"
          }
        }
      }
    }

Config file layout::

    {"persistence_mode": "JSON"}

Rules
-----
* A missing file means "empty" / "defaults", never an error.
* Saves replace the whole file through a temporary sibling and
  :func:`os.replace`, so readers see either the old or the new snapshot.
* A rewritten file keeps its permission bits; a new file gets the
  usual umask-derived mode.
* Files are not locked.  Concurrent invocations against the same file
  are unsupported; the last writer wins.
* ``OSError`` and ``json`` errors never escape this module — they are
  re-raised as :class:`PersistenceError` / :class:`CorruptStoreError`.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from taskmanager.core.identifiers import Identifier
from taskmanager.core.models import Config, PersistenceMode, Project, Task, TaskStatus, TaskType
from taskmanager.core.project_data import ProjectData
from taskmanager.exceptions import CorruptStoreError, PersistenceError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Record codecs
# ---------------------------------------------------------------------------

def _task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": str(task.id),
        "name": task.name,
        "description": task.description,
        "type_": task.type_.value,
        "status": task.status.value,
    }


def _project_to_record(project: Project) -> dict[str, Any]:
    return {
        "id": str(project.id),
        "name": project.name,
        "description": project.description,
        "tasks": {str(tid): _task_to_record(t) for tid, t in project.tasks.items()},
    }


def projects_to_json(data: ProjectData) -> dict[str, Any]:
    """Return the JSON-ready mapping for *data*."""
    return {str(p.id): _project_to_record(p) for p in data.list_projects()}


def _require_str(record: dict[str, Any], key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string")
    return value


def _require_mapping(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be a JSON object")
    return value


def _keyed_id(key: str, record: dict[str, Any]) -> Identifier:
    """Parse the record ``id`` and check it matches the map key."""
    identifier = Identifier(_require_str(record, "id"))
    if Identifier(key) != identifier:
        raise ValueError(f"key {key} does not match id {identifier}")
    return identifier


def _task_from_record(key: str, record: Any) -> Task:
    record = _require_mapping(record, "task")
    return Task(
        id=_keyed_id(key, record),
        name=_require_str(record, "name"),
        description=_require_str(record, "description"),
        type_=TaskType(record["type_"]),
        status=TaskStatus(record["status"]),
    )


def _project_from_record(key: str, record: Any) -> Project:
    record = _require_mapping(record, "project")
    tasks = _require_mapping(record["tasks"], "tasks")
    return Project(
        id=_keyed_id(key, record),
        name=_require_str(record, "name"),
        description=_require_str(record, "description"),
        tasks={t.id: t for t in (_task_from_record(k, r) for k, r in tasks.items())},
    )


def projects_from_json(raw: Any) -> ProjectData:
    """Build a :class:`ProjectData` from decoded JSON.

    Raises
    ------
    CorruptStoreError
        When *raw* does not have the projects file shape.
    """
    try:
        projects = _require_mapping(raw, "projects file")
        return ProjectData(_project_from_record(k, r) for k, r in projects.items())
    except (KeyError, TypeError, ValueError) as exc:
        raise CorruptStoreError(f"Malformed project data: {exc}") from exc


def config_from_json(raw: Any) -> Config:
    """Build a :class:`Config` from decoded JSON.

    Raises
    ------
    CorruptStoreError
        When *raw* is not a config object or names an unknown mode.
    """
    try:
        record = _require_mapping(raw, "config file")
        return Config(persistence_mode=PersistenceMode(record["persistence_mode"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise CorruptStoreError(f"Malformed configuration: {exc}") from exc


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------

def _read_json(path: Path) -> Any:
    """Decode *path*; the caller has already checked it exists."""
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise CorruptStoreError(
            f"Cannot parse {path}: {exc}",
            hint="Fix or remove the file; a missing file is treated as empty.",
        ) from exc
    except OSError as exc:
        raise PersistenceError(f"Cannot read {path}: {exc}") from exc


def _file_mode(path: Path) -> int:
    """Permission bits for a rewrite of *path*.

    An existing file keeps its mode; a new one gets ``0o666`` minus the umask,
    as :func:`open` would give it.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_json_atomic(path: Path, payload: Any) -> None:
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            json.dump(payload, fh, indent=2)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, _file_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise PersistenceError(f"Cannot write {path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

class JsonProjectStore:
    """Concrete :class:`~taskmanager.core.protocols.ProjectStore`.

    Parameters
    ----------
    path:
        Location of the projects file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_projects(self) -> ProjectData:
        if not self.path.exists():
            logger.debug("No projects file at %s; starting empty", self.path)
            return ProjectData()
        data = projects_from_json(_read_json(self.path))
        logger.debug("Loaded %d project(s) from %s", len(data), self.path)
        return data

    def save_projects(self, data: ProjectData) -> None:
        _write_json_atomic(self.path, projects_to_json(data))
        logger.debug("Saved %d project(s) to %s", len(data), self.path)


class JsonConfigStore:
    """Concrete :class:`~taskmanager.core.protocols.ConfigStore`."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_config(self) -> Config:
        if not self.path.exists():
            logger.debug("No config file at %s; using defaults", self.path)
            return Config()
        return config_from_json(_read_json(self.path))
