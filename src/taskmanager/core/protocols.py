"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure stores must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the session can be driven by in-memory fakes in
tests and by new backends when :class:`PersistenceMode` grows.
"""

from __future__ import annotations

from typing import Protocol

from taskmanager.core.models import Config
from taskmanager.core.project_data import ProjectData


class ProjectStore(Protocol):
    """Contract for project collection backends."""

    def load_projects(self) -> ProjectData:
        """Return the persisted collection.

        A missing backing file is an empty collection, not an error.

        Raises
        ------
        CorruptStoreError
            When stored data exists but cannot be parsed.
        PersistenceError
            When the backing file cannot be read.
        """
        ...  # pragma: no cover

    def save_projects(self, data: ProjectData) -> None:
        """Replace the persisted collection with *data*.

        Readers must never observe a partially written snapshot.

        Raises
        ------
        PersistenceError
            When the snapshot cannot be written.
        """
        ...  # pragma: no cover


class ConfigStore(Protocol):
    """Contract for configuration backends."""

    def load_config(self) -> Config:
        """Return the persisted configuration, or defaults when absent.

        Raises
        ------
        CorruptStoreError
            When stored configuration exists but cannot be parsed.
        """
        ...  # pragma: no cover
