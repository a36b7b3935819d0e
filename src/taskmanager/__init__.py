"""taskmanager — manage projects and their tasks from the command line.

State lives in plain JSON files on local disk; see
:mod:`taskmanager.infra.json_store` for the on-disk format.
"""

from taskmanager.version import __version__

__all__: list[str] = ["__version__"]
