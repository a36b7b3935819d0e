"""Tests for domain models (core/models.py).

Covers the lenient tag parsing rules and entity construction.
"""

from __future__ import annotations

import pytest

from taskmanager.core.models import (
    Config,
    PersistenceMode,
    Project,
    Task,
    TaskStatus,
    TaskType,
)


# ---------------------------------------------------------------------------
# TaskType
# ---------------------------------------------------------------------------

class TestTaskTypeParse:
    def test_default(self) -> None:
        assert TaskType.parse("default") is TaskType.DEFAULT

    @pytest.mark.parametrize("text", ["", "bug", "Default", "feature"])
    def test_unrecognised_falls_back_to_default(self, text: str) -> None:
        assert TaskType.parse(text) is TaskType.DEFAULT

    def test_stored_value(self) -> None:
        assert TaskType.DEFAULT.value == "Default"
        assert TaskType.DEFAULT.label == "default"


# ---------------------------------------------------------------------------
# TaskStatus
# ---------------------------------------------------------------------------

class TestTaskStatusParse:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("todo", TaskStatus.TODO),
            ("in_progress", TaskStatus.IN_PROGRESS),
            ("complete", TaskStatus.COMPLETE),
        ],
    )
    def test_recognised(self, text: str, expected: TaskStatus) -> None:
        assert TaskStatus.parse(text) is expected

    @pytest.mark.parametrize("text", ["", "done", "in-progress", "TODO"])
    def test_unrecognised_falls_back_to_default(self, text: str) -> None:
        assert TaskStatus.parse(text) is TaskStatus.DEFAULT

    def test_fallback_override(self) -> None:
        assert TaskStatus.parse("done", fallback=TaskStatus.TODO) is TaskStatus.TODO

    def test_labels(self) -> None:
        assert TaskStatus.TODO.label == "todo"
        assert TaskStatus.IN_PROGRESS.label == "in_progress"
        assert TaskStatus.COMPLETE.label == "complete"
        assert TaskStatus.DEFAULT.label == "default"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

class TestTaskCreate:
    def test_defaults(self) -> None:
        task = Task.create("Write docs", "")
        assert task.name == "Write docs"
        assert task.description == ""
        assert task.type_ is TaskType.DEFAULT
        assert task.status is TaskStatus.TODO

    def test_invalid_type_becomes_default(self) -> None:
        assert Task.create("t", "", type_="epic").type_ is TaskType.DEFAULT

    def test_invalid_status_becomes_todo(self) -> None:
        assert Task.create("t", "", status="blocked").status is TaskStatus.TODO

    def test_valid_status_is_kept(self) -> None:
        assert Task.create("t", "", status="complete").status is TaskStatus.COMPLETE

    def test_fresh_ids(self) -> None:
        assert Task.create("a", "").id != Task.create("a", "").id


class TestProjectCreate:
    def test_empty_tasks(self) -> None:
        project = Project.create("Alpha", "desc A")
        assert project.name == "Alpha"
        assert project.description == "desc A"
        assert project.tasks == {}

    def test_tasks_not_shared(self) -> None:
        a = Project.create("a", "")
        b = Project.create("b", "")
        assert a.tasks is not b.tasks


class TestConfig:
    def test_default_mode_is_json(self) -> None:
        assert Config().persistence_mode is PersistenceMode.JSON

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Config().persistence_mode = PersistenceMode.JSON  # type: ignore[misc]
