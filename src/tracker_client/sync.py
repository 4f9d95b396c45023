"""Keep a project's progress and status in line with its tasks.

The backend stores completion_progress and status on the project, but both
are derived from the tasks on the client and pushed back after every task
mutation. The two writes are separate PUTs, issued strictly one after the
other: progress first, then status.
"""

from dataclasses import dataclass, field

from tracker_client.aggregator import compute_progress, compute_status
from tracker_client.client import TrackerAPIClient
from tracker_client.config import get_settings
from tracker_client.errors import TrackerAPIError
from tracker_client.logging import bind_project_context, get_logger, unbind_project_context
from tracker_client.models import ProjectStatus, ProjectUpdate, TaskDTO

logger = get_logger(__name__)


@dataclass
class DerivedState:
    """Outcome of one refresh: the tasks seen and what was pushed."""

    project_id: str
    tasks: list[TaskDTO] = field(default_factory=list)
    progress: float = 0.0
    status: ProjectStatus = ProjectStatus.DRAFT
    progress_pushed: bool = False
    status_pushed: bool = False
    skipped: bool = False

    @property
    def pushed(self) -> bool:
        return self.progress_pushed and self.status_pushed


async def _push_progress(client: TrackerAPIClient, project_id: str, progress: float) -> bool:
    try:
        await client.update_project(project_id, ProjectUpdate(completion_progress=progress))
    except TrackerAPIError as e:
        logger.error("project_progress_update_failed", progress=progress, error=str(e))
        return False
    logger.info("project_progress_updated", progress=progress)
    return True


async def _push_status(client: TrackerAPIClient, project_id: str, status: ProjectStatus) -> bool:
    try:
        await client.update_project(project_id, ProjectUpdate(status=status))
    except TrackerAPIError as e:
        logger.error("project_status_update_failed", status=status.value, error=str(e))
        return False
    logger.info("project_status_updated", status=status.value)
    return True


async def refresh_project_derived_state(
    client: TrackerAPIClient,
    project_id: str | None,
    *,
    normalize_empty: bool | None = None,
) -> DerivedState | None:
    """Recompute progress/status from the project's tasks and push both.

    Returns None when the project id is missing or its tasks could not be
    fetched. A project without tasks is left untouched on the backend
    unless ``normalize_empty`` (default: TRACKER_NORMALIZE_EMPTY_PROJECTS)
    is set, in which case it is reset to 0 / draft.
    """
    if project_id is None or not str(project_id).strip():
        logger.warning("project_refresh_skipped", reason="missing project id")
        return None

    project_id = str(project_id)
    if normalize_empty is None:
        normalize_empty = get_settings().normalize_empty_projects

    bind_project_context(project_id)
    try:
        try:
            tasks = await client.list_project_tasks(project_id)
        except TrackerAPIError as e:
            logger.error("project_tasks_fetch_failed", error=str(e))
            return None

        state = DerivedState(
            project_id=project_id,
            tasks=tasks,
            progress=compute_progress(tasks),
            status=compute_status(tasks),
        )

        if not tasks and not normalize_empty:
            logger.info("project_has_no_tasks")
            state.skipped = True
            return state

        # Progress must be acknowledged before the status write starts.
        state.progress_pushed = await _push_progress(client, project_id, state.progress)
        state.status_pushed = await _push_status(client, project_id, state.status)
        return state
    finally:
        unbind_project_context()


async def refresh_all(client: TrackerAPIClient) -> list[DerivedState]:
    """Refresh every project, one after another."""
    projects = await client.list_projects()
    results: list[DerivedState] = []
    for project in projects:
        state = await refresh_project_derived_state(client, project.id)
        if state is not None:
            results.append(state)
    return results
