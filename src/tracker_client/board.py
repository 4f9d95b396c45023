"""Full reload of the project board."""

from dataclasses import dataclass, field

from tracker_client.aggregator import compute_progress, compute_status
from tracker_client.client import TrackerAPIClient
from tracker_client.errors import TrackerAPIError
from tracker_client.logging import get_logger
from tracker_client.models import ProjectDTO, ProjectStatus, TaskDTO
from tracker_client.sync import refresh_project_derived_state

logger = get_logger(__name__)

NO_PROJECTS_MESSAGE = "No projects found."
PROJECTS_ERROR_MESSAGE = "Error loading projects."
NO_TASKS_MESSAGE = "No tasks found for this project."


@dataclass
class ProjectView:
    project: ProjectDTO
    tasks: list[TaskDTO] = field(default_factory=list)
    progress: float = 0.0
    status: ProjectStatus = ProjectStatus.DRAFT
    tasks_error: bool = False


@dataclass
class Board:
    projects: list[ProjectView] = field(default_factory=list)
    error: str | None = None

    @property
    def placeholder(self) -> str | None:
        if self.error:
            return self.error
        if not self.projects:
            return NO_PROJECTS_MESSAGE
        return None

    def to_dict(self) -> dict:
        return {
            "error": self.error,
            "projects": [
                {
                    **view.project.model_dump(mode="json"),
                    "status": view.status.value,
                    "completion_progress": view.progress,
                    "tasks": [task.model_dump(mode="json") for task in view.tasks],
                }
                for view in self.projects
            ],
        }


async def _load_project(client: TrackerAPIClient, project: ProjectDTO, sync: bool) -> ProjectView:
    view = ProjectView(
        project=project,
        progress=project.completion_progress,
        status=project.status,
    )

    state = await refresh_project_derived_state(client, project.id) if sync else None
    if state is not None:
        tasks = state.tasks
    else:
        try:
            tasks = await client.list_project_tasks(project.id)
        except TrackerAPIError as e:
            logger.warning("project_tasks_unavailable", project_id=project.id, error=str(e))
            view.tasks_error = True
            view.progress = 0.0
            return view

    view.tasks = tasks
    view.progress = compute_progress(tasks)
    if tasks:
        view.status = compute_status(tasks)
    return view


async def load_board(client: TrackerAPIClient, *, sync: bool = True) -> Board:
    """Fetch every project with its tasks and derived fields.

    With ``sync`` each project's progress and status are pushed back to the
    backend along the way. Failures never propagate: the board carries an
    error message for the list, or a per-project task error.
    """
    try:
        projects = await client.list_projects()
    except TrackerAPIError as e:
        logger.error("projects_fetch_failed", error=str(e))
        return Board(error=PROJECTS_ERROR_MESSAGE)

    board = Board()
    for project in projects:
        board.projects.append(await _load_project(client, project, sync))
    logger.debug("board_loaded", projects=len(board.projects))
    return board
