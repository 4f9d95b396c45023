"""Completion progress and status rollup for a project's tasks."""

from collections.abc import Sequence

from tracker_client.models import ProjectStatus, TaskDTO, TaskStatus


def compute_progress(tasks: Sequence[TaskDTO]) -> float:
    """Percentage of total task weight held by done tasks, rounded to 2 places.

    An empty list, or one whose weights sum to zero, counts as 0.
    """
    total_weight = 0.0
    completed_weight = 0.0
    for task in tasks:
        total_weight += task.weight
        if task.status == TaskStatus.DONE:
            completed_weight += task.weight

    if total_weight <= 0:
        return 0.0
    return round(completed_weight / total_weight * 100, 2)


def compute_status(tasks: Sequence[TaskDTO]) -> ProjectStatus:
    """Derive project status from task statuses.

    "All done" wins over "any in progress"; everything else is a draft,
    including an empty list.
    """
    if not tasks:
        return ProjectStatus.DRAFT
    if all(task.status == TaskStatus.DONE for task in tasks):
        return ProjectStatus.DONE
    if any(task.status == TaskStatus.IN_PROGRESS for task in tasks):
        return ProjectStatus.IN_PROGRESS
    return ProjectStatus.DRAFT
