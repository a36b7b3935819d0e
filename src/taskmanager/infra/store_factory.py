"""Map a :class:`~taskmanager.core.models.PersistenceMode` to a store.

New backends register here; the core only ever sees the
:class:`~taskmanager.core.protocols.ProjectStore` protocol.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from taskmanager.core.models import PersistenceMode
from taskmanager.core.protocols import ProjectStore
from taskmanager.infra.json_store import JsonProjectStore

_BACKENDS: dict[PersistenceMode, Callable[[Path], ProjectStore]] = {
    PersistenceMode.JSON: JsonProjectStore,
}


def build_project_store(mode: PersistenceMode, path: str | Path) -> ProjectStore:
    """Return the project store for *mode* rooted at *path*."""
    return _BACKENDS[mode](Path(path))


def project_store_resolver(path: str | Path) -> Callable[[PersistenceMode], ProjectStore]:
    """Bind *path* so :meth:`Session.open` only has to supply the mode."""

    def resolve(mode: PersistenceMode) -> ProjectStore:
        return build_project_store(mode, path)

    return resolve
