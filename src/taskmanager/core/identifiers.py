"""Identifier service for projects and tasks.

Identifiers are random 128-bit UUIDs (version 4).  Their canonical
string form — lowercase, hyphenated — is what gets written to JSON and
accepted on the command line.
"""

from __future__ import annotations

import uuid

from taskmanager.exceptions import InvalidIdentifierError

Identifier = uuid.UUID
"""Type alias used throughout the core for project and task keys."""


def new_id() -> Identifier:
    """Return a fresh random identifier."""
    return uuid.uuid4()


def parse_id(text: str) -> Identifier:
    """Parse *text* into an :data:`Identifier`.

    Raises
    ------
    InvalidIdentifierError
        When *text* is not a syntactically valid UUID string.
    """
    try:
        return uuid.UUID(text.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidIdentifierError(
            f"Invalid identifier: {text!r}",
            hint="Identifiers look like 3f2b8c1e-6a4d-4e0b-9c55-2d1f7a9e0b13.",
        ) from exc
