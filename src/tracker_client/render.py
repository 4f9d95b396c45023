"""Rich renderables for the project board."""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from tracker_client.board import NO_TASKS_MESSAGE, Board, ProjectView
from tracker_client.models import ProjectStatus, TaskStatus

STATUS_STYLES = {
    "draft": "yellow",
    "in progress": "cyan",
    "done": "green",
}


def _status_text(status: ProjectStatus | TaskStatus) -> Text:
    return Text(status.value, style=STATUS_STYLES.get(status.value, "white"))


def _format_weight(weight: float) -> str:
    return str(int(weight)) if weight.is_integer() else f"{weight:g}"


def render_progress(progress: float) -> RenderableType:
    table = Table.grid(padding=(0, 1))
    table.add_column(ratio=1)
    table.add_column(justify="right", width=8)
    table.add_row(
        ProgressBar(total=100, completed=progress, complete_style="green"),
        f"{progress:.2f}%",
    )
    return table


def render_tasks(view: ProjectView) -> RenderableType:
    table = Table(expand=True, show_edge=False)
    table.add_column("Name", style="magenta")
    table.add_column("Status")
    table.add_column("Weight", justify="right")
    table.add_column("ID", style="cyan", no_wrap=True)

    if view.tasks_error or not view.tasks:
        table.add_row(Text(NO_TASKS_MESSAGE, style="dim"), "", "", "")
        return table

    for task in view.tasks:
        table.add_row(
            Text(task.name), _status_text(task.status), _format_weight(task.weight), Text(task.id)
        )
    return table


def render_project(view: ProjectView) -> Panel:
    header = Text.assemble("Status: ", _status_text(view.status))
    return Panel(
        Group(header, Text("Progress:"), render_progress(view.progress), render_tasks(view)),
        title=Text(view.project.name, style="bold"),
        subtitle=Text(f"#{view.project.id}"),
        title_align="left",
        subtitle_align="right",
    )


def render_board(board: Board) -> RenderableType:
    if board.placeholder is not None:
        style = "bold red" if board.error else "dim"
        return Text(board.placeholder, style=style, justify="center")
    return Group(*(render_project(view) for view in board.projects))
