"""Tests for the typed API records."""

from pydantic import ValidationError
import pytest

from tracker_client.models import (
    ProjectCreate,
    ProjectDTO,
    ProjectStatus,
    ProjectUpdate,
    TaskCreate,
    TaskDTO,
    TaskStatus,
    TaskUpdate,
)

from tests.unit.factories import project_json, task_json


class TestProjectDTO:
    def test_integer_id_is_normalized(self):
        project = ProjectDTO.model_validate(project_json(project_id=7))
        assert project.id == "7"

    def test_string_progress_is_accepted(self):
        project = ProjectDTO.model_validate(project_json(progress="50.00"))
        assert project.completion_progress == 50.0

    def test_null_progress_defaults_to_zero(self):
        project = ProjectDTO.model_validate(project_json(progress=None))
        assert project.completion_progress == 0.0

    def test_status_with_space(self):
        project = ProjectDTO.model_validate(project_json(status="in progress"))
        assert project.status == ProjectStatus.IN_PROGRESS

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            ProjectDTO.model_validate(project_json(status="archived"))

    def test_missing_name_rejected(self):
        data = project_json()
        del data["name"]
        with pytest.raises(ValidationError):
            ProjectDTO.model_validate(data)

    def test_extra_fields_ignored(self):
        data = {**project_json(), "created_at": "2024-01-01"}
        assert ProjectDTO.model_validate(data).name == "Website"


class TestTaskDTO:
    def test_ids_are_normalized(self):
        task = TaskDTO.model_validate(task_json(task_id=3, project_id=9))
        assert task.id == "3"
        assert task.project_id == "9"

    def test_string_weight_is_accepted(self):
        task = TaskDTO.model_validate(task_json(weight="4"))
        assert task.weight == 4.0

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            TaskDTO.model_validate(task_json(weight=-1))


class TestPayloads:
    def test_project_create_defaults(self):
        payload = ProjectCreate(name="Website").model_dump(mode="json")
        assert payload == {"name": "Website", "status": "draft", "completion_progress": 0}

    def test_project_update_sends_only_progress(self):
        assert ProjectUpdate(completion_progress=50.0).to_payload() == {"completion_progress": 50.0}

    def test_project_update_sends_only_status(self):
        update = ProjectUpdate(status=ProjectStatus.IN_PROGRESS)
        assert update.to_payload() == {"status": "in progress"}

    def test_project_update_sends_only_name(self):
        assert ProjectUpdate(name="Renamed").to_payload() == {"name": "Renamed"}

    def test_task_create_requires_positive_weight(self):
        with pytest.raises(ValidationError):
            TaskCreate(project_id="1", name="Task", status=TaskStatus.DRAFT, weight=0)

    def test_task_create_payload(self):
        payload = TaskCreate(project_id="1", name="Task", status="done", weight=2)
        assert payload.model_dump(mode="json") == {
            "project_id": "1",
            "name": "Task",
            "status": "done",
            "weight": 2.0,
        }

    def test_task_update_accepts_existing_zero_weight(self):
        assert TaskUpdate(name="Task", status="done", weight=0).weight == 0.0
        with pytest.raises(ValidationError):
            TaskUpdate(name="Task", status="done", weight=-1)
