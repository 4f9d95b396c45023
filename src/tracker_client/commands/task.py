from rich.markup import escape
import typer

from tracker_client import actions
from tracker_client.commands.common import (
    confirm_or_abort,
    console,
    echo_json,
    run_action,
    show_board,
)
from tracker_client.models import TaskStatus

app = typer.Typer()


def _report(result: actions.ActionResult, message: str, json_output: bool) -> None:
    if json_output:
        echo_json(result.record.model_dump(mode="json") if result.record else {})
        return

    console.print(f"[bold green]✓ {escape(message)}[/bold green]")
    if result.derived is not None:
        console.print(
            f"Project #{escape(result.derived.project_id)}: "
            f"{result.derived.progress:.2f}% [cyan]{result.derived.status.value}[/cyan]"
        )
    show_board(result.board)


@app.command()
def add(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project ID"),
    name: str = typer.Option(..., "--name", "-n", help="Task name"),
    status: TaskStatus = typer.Option(TaskStatus.DRAFT, "--status", "-s", help="Task status"),
    weight: float = typer.Option(..., "--weight", "-w", help="Task weight"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Add a task to a project."""
    result = run_action(
        ctx,
        lambda client: actions.create_task(
            client, project_id, name, status, weight, reload=not json_output
        ),
    )
    _report(result, "Task added!", json_output)


@app.command()
def edit(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
    name: str | None = typer.Option(None, "--name", "-n", help="Task name"),
    status: TaskStatus | None = typer.Option(None, "--status", "-s", help="Task status"),
    weight: float | None = typer.Option(None, "--weight", "-w", help="Task weight"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Edit a task. Options left out keep their current values."""

    async def _edit(client):
        session = await actions.open_task_edit(client, task_id)
        return await actions.submit_task_edit(
            client,
            session,
            session.name if name is None else name,
            session.status if status is None else status,
            session.weight if weight is None else weight,
            reload=not json_output,
        )

    result = run_action(ctx, _edit)
    _report(result, "Task updated!", json_output)


@app.command()
def delete(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a task."""
    confirm_or_abort("Are you sure you want to delete this task?", yes)

    result = run_action(ctx, lambda client: actions.delete_task(client, task_id))
    _report(result, f"Task {task_id} deleted.", False)
