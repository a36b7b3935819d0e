"""Infrastructure layer — filesystem and environment integration.

Every raw ``OSError`` / ``json`` exception must be caught here and
re-raised as a :class:`~taskmanager.exceptions.TaskManagerError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from taskmanager.infra.json_store import JsonConfigStore, JsonProjectStore
from taskmanager.infra.settings import Settings, load_settings
from taskmanager.infra.store_factory import build_project_store, project_store_resolver

__all__: list[str] = [
    "JsonConfigStore",
    "JsonProjectStore",
    "Settings",
    "build_project_store",
    "load_settings",
    "project_store_resolver",
]
