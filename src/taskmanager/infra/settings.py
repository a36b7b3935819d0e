"""File locations for the current run.

Resolution order for each path: explicit argument (command-line flag),
then environment variable, then a default file name in the current
working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKMANAGER"

DEFAULT_PROJECTS_FILE = "projects.json"
DEFAULT_CONFIG_FILE = "config.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _resolve(explicit: str | Path | None, env_suffix: str, default: str) -> Path:
    if explicit is not None:
        return Path(explicit)
    raw = os.getenv(_k(env_suffix))
    if raw is not None and raw.strip() != "":
        return Path(raw.strip())
    return Path(default)


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved locations of the persisted files."""

    projects_file: Path
    config_file: Path


def load_settings(
    *,
    projects_file: str | Path | None = None,
    config_file: str | Path | None = None,
) -> Settings:
    """Resolve :class:`Settings` from arguments and the environment."""
    return Settings(
        projects_file=_resolve(projects_file, "PROJECTS_FILE", DEFAULT_PROJECTS_FILE),
        config_file=_resolve(config_file, "CONFIG_FILE", DEFAULT_CONFIG_FILE),
    )
