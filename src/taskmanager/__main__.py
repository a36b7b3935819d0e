"""Allow ``python -m taskmanager`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m taskmanager`` behaves identically to the ``taskmanager``
console script.
"""

from __future__ import annotations

from taskmanager.cli.app import cli

if __name__ == "__main__":
    cli()
