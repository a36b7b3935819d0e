"""Tests for the aggregate root (core/project_data.py).

Pure in-memory tests — no files involved.
"""

from __future__ import annotations

import pytest

from taskmanager.core.identifiers import new_id
from taskmanager.core.models import TaskStatus, TaskType
from taskmanager.core.project_data import ProjectData
from taskmanager.exceptions import NotFoundError, ProjectNotFoundError, TaskNotFoundError


@pytest.fixture()
def data() -> ProjectData:
    return ProjectData()


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

class TestCreateProject:
    @pytest.mark.parametrize(
        ("name", "description"),
        [("Alpha", "desc A"), ("", ""), ("Ünïcode ✓", "multi\nline")],
    )
    def test_retrievable_with_exact_fields(
        self, data: ProjectData, name: str, description: str
    ) -> None:
        project_id = data.create_project(name, description)
        project = data.get_project(project_id)
        assert project.id == project_id
        assert project.name == name
        assert project.description == description
        assert project.tasks == {}

    def test_description_defaults_to_empty(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        assert data.get_project(project_id).description == ""

    def test_ids_are_unique(self, data: ProjectData) -> None:
        ids = {data.create_project("same") for _ in range(20)}
        assert len(ids) == 20
        assert len(data) == 20


class TestListProjects:
    def test_empty(self, data: ProjectData) -> None:
        assert data.list_projects() == []

    def test_insertion_order(self, data: ProjectData) -> None:
        ids = [data.create_project(n) for n in ("a", "b", "c")]
        assert [p.id for p in data.list_projects()] == ids


class TestDestroyProject:
    def test_removes_project(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        data.destroy_project(project_id)
        assert project_id not in data
        with pytest.raises(ProjectNotFoundError):
            data.get_project(project_id)

    def test_cascades_to_tasks(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        task_ids = [data.create_task(project_id, f"T{i}") for i in range(3)]
        data.destroy_project(project_id)
        for task_id in task_ids:
            with pytest.raises(NotFoundError):
                data.get_task(project_id, task_id)
            with pytest.raises(ProjectNotFoundError):
                data.destroy_task(project_id, task_id)

    def test_missing_raises(self, data: ProjectData) -> None:
        with pytest.raises(ProjectNotFoundError) as exc_info:
            data.destroy_project(new_id())
        assert exc_info.value.entity == "project"

    def test_other_projects_untouched(self, data: ProjectData) -> None:
        keep = data.create_project("keep")
        data.create_task(keep, "stays")
        data.destroy_project(data.create_project("drop"))
        assert [p.id for p in data.list_projects()] == [keep]
        assert len(data.list_tasks(keep)) == 1


class TestUpdateProject:
    def test_name_only(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha", "desc A")
        data.update_project(project_id, name="Beta")
        project = data.get_project(project_id)
        assert project.name == "Beta"
        assert project.description == "desc A"

    def test_description_only(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha", "desc A")
        data.update_project(project_id, description="desc B")
        project = data.get_project(project_id)
        assert project.name == "Alpha"
        assert project.description == "desc B"

    def test_empty_string_is_a_value(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha", "desc A")
        data.update_project(project_id, description="")
        assert data.get_project(project_id).description == ""

    def test_nothing_supplied_is_noop(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha", "desc A")
        data.update_project(project_id)
        project = data.get_project(project_id)
        assert (project.name, project.description) == ("Alpha", "desc A")

    def test_id_is_stable(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        data.update_project(project_id, name="Beta")
        assert data.get_project(project_id).id == project_id

    def test_missing_raises(self, data: ProjectData) -> None:
        with pytest.raises(ProjectNotFoundError):
            data.update_project(new_id(), name="x")


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------

class TestCreateTask:
    def test_defaults(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        task_id = data.create_task(project_id, "T1", "")
        task = data.get_task(project_id, task_id)
        assert task.id == task_id
        assert task.name == "T1"
        assert task.description == ""
        assert task.type_ is TaskType.DEFAULT
        assert task.status is TaskStatus.TODO

    def test_missing_project_raises(self, data: ProjectData) -> None:
        with pytest.raises(ProjectNotFoundError):
            data.create_task(new_id(), "T1")

    def test_tasks_are_scoped_to_project(self, data: ProjectData) -> None:
        a = data.create_project("a")
        b = data.create_project("b")
        task_id = data.create_task(a, "T1")
        assert data.list_tasks(b) == []
        with pytest.raises(TaskNotFoundError):
            data.get_task(b, task_id)


class TestDestroyTask:
    def test_removes_only_that_task(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        keep = data.create_task(project_id, "keep")
        drop = data.create_task(project_id, "drop")
        data.destroy_task(project_id, drop)
        assert [t.id for t in data.list_tasks(project_id)] == [keep]

    def test_missing_project_and_missing_task_are_distinct(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        with pytest.raises(ProjectNotFoundError) as project_exc:
            data.destroy_task(new_id(), new_id())
        with pytest.raises(TaskNotFoundError) as task_exc:
            data.destroy_task(project_id, new_id())
        assert project_exc.value.entity == "project"
        assert task_exc.value.entity == "task"


class TestUpdateTask:
    def test_name_only(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        task_id = data.create_task(project_id, "T1", "first")
        data.update_task(project_id, task_id, name="T2")
        task = data.get_task(project_id, task_id)
        assert task.name == "T2"
        assert task.description == "first"

    def test_description_only(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        task_id = data.create_task(project_id, "T1", "first")
        data.update_task(project_id, task_id, description="second")
        task = data.get_task(project_id, task_id)
        assert task.name == "T1"
        assert task.description == "second"

    def test_status_is_untouched(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        task_id = data.create_task(project_id, "T1")
        data.update_task(project_id, task_id, name="T2", description="d")
        assert data.get_task(project_id, task_id).status is TaskStatus.TODO

    def test_missing_project_raises(self, data: ProjectData) -> None:
        with pytest.raises(ProjectNotFoundError):
            data.update_task(new_id(), new_id(), name="x")

    def test_missing_task_raises(self, data: ProjectData) -> None:
        project_id = data.create_project("Alpha")
        with pytest.raises(TaskNotFoundError):
            data.update_task(project_id, new_id(), name="x")


class TestListTasks:
    def test_missing_project_raises(self, data: ProjectData) -> None:
        with pytest.raises(ProjectNotFoundError):
            data.list_tasks(new_id())


class TestScenario:
    def test_alpha_t1_lifecycle(self, data: ProjectData) -> None:
        p1 = data.create_project("Alpha", "desc A")
        t1 = data.create_task(p1, "T1", "")
        assert data.get_task(p1, t1).status is TaskStatus.TODO

        tasks = data.list_tasks(p1)
        assert len(tasks) == 1
        assert tasks[0].name == "T1"
        assert tasks[0].status is TaskStatus.TODO

        data.destroy_project(p1)
        with pytest.raises(ProjectNotFoundError):
            data.list_tasks(p1)
