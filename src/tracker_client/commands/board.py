from rich.markup import escape
import typer

from tracker_client.board import load_board
from tracker_client.commands.common import console, echo_json, run_with_client, show_board
from tracker_client.errors import TrackerError
from tracker_client.sync import refresh_all, refresh_project_derived_state


def board(
    ctx: typer.Context,
    no_sync: bool = typer.Option(
        False, "--no-sync", help="Do not push recomputed progress/status back"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show all projects with their tasks and progress."""
    result = run_with_client(ctx, lambda client: load_board(client, sync=not no_sync))

    if json_output:
        echo_json(result.to_dict())
    else:
        show_board(result)

    if result.error:
        raise typer.Exit(code=1)


def sync(
    ctx: typer.Context,
    project_id: str | None = typer.Argument(None, help="Project ID (default: all projects)"),
):
    """Recompute and push progress/status for one or all projects."""

    async def _sync(client):
        if project_id is not None:
            # The task list 404s for unknown projects as well as empty ones.
            await client.get_project(project_id)
            state = await refresh_project_derived_state(client, project_id)
            return [] if state is None else [state]
        return await refresh_all(client)

    try:
        states = run_with_client(ctx, _sync)
    except TrackerError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from None

    if project_id is not None and not states:
        console.print(
            f"[bold red]Error:[/bold red] could not load tasks for project {escape(project_id)}"
        )
        raise typer.Exit(code=1)

    failed = False
    for state in states:
        if state.skipped:
            console.print(f"[dim]#{escape(state.project_id)}: no tasks, left unchanged[/dim]")
            continue
        mark = "[green]✓[/green]" if state.pushed else "[red]✗[/red]"
        failed = failed or not state.pushed
        console.print(
            f"{mark} #{escape(state.project_id)}: "
            f"{state.progress:.2f}% [cyan]{state.status.value}[/cyan]"
        )

    if failed:
        raise typer.Exit(code=1)
