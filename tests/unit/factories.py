"""Payload builders shared by the unit tests."""

from tracker_client.models import TaskDTO

API_URL = "http://tracker.test"


def project_json(project_id=1, name="Website", status="draft", progress=0):
    return {
        "id": project_id,
        "name": name,
        "status": status,
        "completion_progress": progress,
    }


def task_json(task_id=1, project_id=1, name="Task", status="draft", weight=1):
    return {
        "id": task_id,
        "project_id": project_id,
        "name": name,
        "status": status,
        "weight": weight,
    }


def make_task(status="draft", weight=1, task_id=1, project_id=1):
    return TaskDTO.model_validate(
        task_json(task_id=task_id, project_id=project_id, status=status, weight=weight)
    )
