"""Shared pytest fixtures and configuration for the taskmanager test suite.

Guidelines
----------
* Every test works inside ``tmp_path`` — never the real working directory.
* Core tests use in-memory stores; infra tests use real files.
* Tests must not depend on a TTY (stdin is never interactive under pytest).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from taskmanager.core.models import Config, PersistenceMode
from taskmanager.core.project_data import ProjectData


class MemoryProjectStore:
    """In-memory :class:`ProjectStore` that records every save."""

    def __init__(self, data: ProjectData | None = None) -> None:
        self.data = data if data is not None else ProjectData()
        self.saves = 0

    def load_projects(self) -> ProjectData:
        return self.data

    def save_projects(self, data: ProjectData) -> None:
        self.data = data
        self.saves += 1


class MemoryConfigStore:
    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()

    def load_config(self) -> Config:
        return self.config


@pytest.fixture()
def project_store() -> MemoryProjectStore:
    return MemoryProjectStore()


@pytest.fixture()
def store_resolver(project_store: MemoryProjectStore):
    def resolve(mode: PersistenceMode) -> MemoryProjectStore:
        return project_store

    return resolve


@pytest.fixture()
def data_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """Point the CLI at files inside ``tmp_path`` via the environment."""
    projects_file = tmp_path / "projects.json"
    config_file = tmp_path / "config.json"
    monkeypatch.setenv("TASKMANAGER_PROJECTS_FILE", str(projects_file))
    monkeypatch.setenv("TASKMANAGER_CONFIG_FILE", str(config_file))
    # Wide enough that Rich never wraps table cells.
    monkeypatch.setenv("COLUMNS", "200")
    return projects_file, config_file
