"""Logging configuration for the ``taskmanager`` process.

Library modules only call ``logging.getLogger(__name__)``; the handler
is installed here by the CLI entry point.
"""

from __future__ import annotations

import logging

_PACKAGE_LOGGER = "taskmanager"


def setup_logging(*, verbose: bool = False) -> None:
    """Route ``taskmanager.*`` log records to stderr through Rich.

    WARNING and above by default; DEBUG when *verbose* is set.

    Safe to call more than once: the previous handler is replaced.
    """
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger(_PACKAGE_LOGGER)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(logger.handlers):
        if isinstance(h, RichHandler):
            logger.removeHandler(h)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
