"""Per-invocation runtime container.

A :class:`Session` is built once at process start and passed to the
dispatch code explicitly.  Lifecycle of one run::

    Session.open()  ->  load Config, load ProjectData
    Session.run()   ->  execute one command
                    ->  save ProjectData if the command mutates and succeeded

Any error raised during load, execute or save propagates unchanged; a
failed command never triggers a save, so the on-disk snapshot stays as
it was before the invocation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from taskmanager.core.commands import Command, CommandExecutor
from taskmanager.core.models import Config, PersistenceMode
from taskmanager.core.project_data import ProjectData
from taskmanager.core.protocols import ConfigStore, ProjectStore

logger = logging.getLogger(__name__)


class Session:
    """Loaded state plus the store it is written back to."""

    def __init__(self, config: Config, data: ProjectData, project_store: ProjectStore) -> None:
        self.config = config
        self.data = data
        self._project_store = project_store

    @classmethod
    def open(
        cls,
        config_store: ConfigStore,
        project_store_for: Callable[[PersistenceMode], ProjectStore],
    ) -> Session:
        """Load the configuration, then the projects from the store it selects."""
        config = config_store.load_config()
        project_store = project_store_for(config.persistence_mode)
        data = project_store.load_projects()
        logger.debug("Session opened: %d project(s), mode=%s", len(data), config.persistence_mode.value)
        return cls(config, data, project_store)

    def run(self, command: Command) -> Any:
        """Execute *command* and persist the snapshot when it mutates."""
        logger.debug("Dispatching %s", type(command).__name__)
        result = CommandExecutor(self.data, self.config).execute(command)
        if command.mutating:
            self._project_store.save_projects(self.data)
            logger.debug("Persisted %d project(s)", len(self.data))
        return result
