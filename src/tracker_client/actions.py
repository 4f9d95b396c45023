"""User-triggered create/edit/delete flows.

Each handler checks its required text fields, issues one mutating request
and, on success, re-derives the affected project's progress/status (task
mutations) and reloads the board. Failures are raised as ActionError with
the message to show the user; nothing is changed locally.

Edit flows are split in two: ``open_*_edit`` fetches the current record
into an edit session, ``submit_*_edit`` sends the edited fields.
"""

from dataclasses import dataclass

from pydantic import ValidationError

from tracker_client.board import Board, load_board
from tracker_client.client import TrackerAPIClient
from tracker_client.errors import ActionError, FieldRequiredError, TrackerAPIError
from tracker_client.logging import get_logger
from tracker_client.models import (
    ProjectCreate,
    ProjectDTO,
    ProjectUpdate,
    TaskCreate,
    TaskDTO,
    TaskStatus,
    TaskUpdate,
)
from tracker_client.sync import DerivedState, refresh_project_derived_state

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProjectEditSession:
    """Project being edited, prefilled from the backend."""

    project_id: str
    name: str


@dataclass(frozen=True)
class TaskEditSession:
    """Task being edited, prefilled from the backend.

    Carries the owning project so the follow-up refresh targets it.
    """

    task_id: str
    project_id: str
    name: str
    status: TaskStatus
    weight: float


@dataclass
class ActionResult:
    record: ProjectDTO | TaskDTO | None = None
    derived: DerivedState | None = None
    board: Board | None = None


def _require(field: str, value: str | None) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise FieldRequiredError(field)
    return cleaned


def _task_fields(name: str | None, status: TaskStatus | str, weight: float | str | None) -> dict:
    fields = {"name": _require("name", name), "status": status}
    if weight is None or (isinstance(weight, str) and not weight.strip()):
        raise FieldRequiredError("weight")
    fields["weight"] = weight
    return fields


def _invalid(e: ValidationError) -> ActionError:
    first = e.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return ActionError(f"Invalid {field}: {first['msg']}")


async def _finish(
    client: TrackerAPIClient,
    record: ProjectDTO | TaskDTO | None,
    *,
    project_id: str | None = None,
    reload: bool,
) -> ActionResult:
    result = ActionResult(record=record)
    if project_id is not None:
        result.derived = await refresh_project_derived_state(client, project_id)
    if reload:
        result.board = await load_board(client)
    return result


# Projects


async def create_project(
    client: TrackerAPIClient, name: str | None, *, reload: bool = True
) -> ActionResult:
    payload = ProjectCreate(name=_require("name", name))
    try:
        project = await client.create_project(payload)
    except TrackerAPIError as e:
        logger.error("project_create_failed", name=payload.name, error=str(e))
        raise ActionError("Error creating project.") from e
    logger.info("project_created", project_id=project.id if project else None)
    return await _finish(client, project, reload=reload)


async def open_project_edit(client: TrackerAPIClient, project_id: str) -> ProjectEditSession:
    try:
        project = await client.get_project(project_id)
    except TrackerAPIError as e:
        logger.error("project_fetch_failed", project_id=project_id, error=str(e))
        raise ActionError("Error loading project.") from e
    return ProjectEditSession(project_id=project.id, name=project.name)


async def submit_project_edit(
    client: TrackerAPIClient,
    session: ProjectEditSession,
    name: str | None,
    *,
    reload: bool = True,
) -> ActionResult:
    update = ProjectUpdate(name=_require("name", name))
    try:
        project = await client.update_project(session.project_id, update)
    except TrackerAPIError as e:
        logger.error("project_edit_failed", project_id=session.project_id, error=str(e))
        raise ActionError("Error editing project.") from e
    logger.info("project_edited", project_id=session.project_id)
    return await _finish(client, project, reload=reload)


async def delete_project(
    client: TrackerAPIClient, project_id: str, *, reload: bool = True
) -> ActionResult:
    """Delete a project; the backend removes its tasks too."""
    try:
        await client.delete_project(project_id)
    except TrackerAPIError as e:
        logger.error("project_delete_failed", project_id=project_id, error=str(e))
        raise ActionError("Error deleting project.") from e
    logger.info("project_deleted", project_id=project_id)
    return await _finish(client, None, reload=reload)


# Tasks


async def create_task(
    client: TrackerAPIClient,
    project_id: str,
    name: str | None,
    status: TaskStatus | str,
    weight: float | str | None,
    *,
    reload: bool = True,
) -> ActionResult:
    fields = _task_fields(name, status, weight)
    try:
        payload = TaskCreate(project_id=project_id, **fields)
    except ValidationError as e:
        raise _invalid(e) from e

    try:
        task = await client.create_task(payload)
    except TrackerAPIError as e:
        logger.error("task_create_failed", project_id=project_id, error=str(e))
        raise ActionError("Error adding task.") from e
    logger.info("task_created", project_id=project_id, task_id=task.id if task else None)
    return await _finish(client, task, project_id=project_id, reload=reload)


async def open_task_edit(client: TrackerAPIClient, task_id: str) -> TaskEditSession:
    try:
        task = await client.get_task(task_id)
    except TrackerAPIError as e:
        logger.error("task_fetch_failed", task_id=task_id, error=str(e))
        raise ActionError("Error loading task.") from e
    return TaskEditSession(
        task_id=task.id,
        project_id=task.project_id,
        name=task.name,
        status=task.status,
        weight=task.weight,
    )


async def submit_task_edit(
    client: TrackerAPIClient,
    session: TaskEditSession,
    name: str | None,
    status: TaskStatus | str,
    weight: float | str | None,
    *,
    reload: bool = True,
) -> ActionResult:
    fields = _task_fields(name, status, weight)
    try:
        update = TaskUpdate(**fields)
    except ValidationError as e:
        raise _invalid(e) from e
    # The prefilled weight may be 0; only a newly entered weight must be positive.
    if update.weight != session.weight and update.weight <= 0:
        raise ActionError("Invalid weight: Input should be greater than 0")

    try:
        task = await client.update_task(session.task_id, update)
    except TrackerAPIError as e:
        logger.error("task_edit_failed", task_id=session.task_id, error=str(e))
        raise ActionError("Error editing task.") from e
    logger.info("task_edited", task_id=session.task_id, project_id=session.project_id)
    return await _finish(client, task, project_id=session.project_id, reload=reload)


async def delete_task(client: TrackerAPIClient, task_id: str, *, reload: bool = True) -> ActionResult:
    """Delete a task and refresh the project it belonged to."""
    try:
        task = await client.get_task(task_id)
        await client.delete_task(task_id)
    except TrackerAPIError as e:
        logger.error("task_delete_failed", task_id=task_id, error=str(e))
        raise ActionError("Error deleting task.") from e
    logger.info("task_deleted", task_id=task_id, project_id=task.project_id)
    return await _finish(client, task, project_id=task.project_id, reload=reload)
