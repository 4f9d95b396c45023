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

app = typer.Typer()


@app.command()
def create(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Project name"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Create a new project (starts as a draft with 0% progress)."""
    result = run_action(
        ctx, lambda client: actions.create_project(client, name, reload=not json_output)
    )

    if json_output:
        echo_json(result.record.model_dump(mode="json") if result.record else {})
        return

    console.print("[bold green]✓ Project created successfully![/bold green]")
    if result.record is not None:
        console.print(f"ID: [cyan]{escape(result.record.id)}[/cyan]")
        console.print(f"Name: [magenta]{escape(result.record.name)}[/magenta]")
    show_board(result.board)


@app.command()
def edit(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project ID"),
    name: str = typer.Option(..., "--name", "-n", help="New project name"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Rename a project."""

    async def _edit(client):
        session = await actions.open_project_edit(client, project_id)
        return await actions.submit_project_edit(client, session, name, reload=not json_output)

    result = run_action(ctx, _edit)

    if json_output:
        echo_json(result.record.model_dump(mode="json") if result.record else {})
        return

    console.print("[bold green]✓ Project updated![/bold green]")
    show_board(result.board)


@app.command()
def delete(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a project and all of its tasks."""
    confirm_or_abort("Are you sure you want to delete this project and its tasks?", yes)

    result = run_action(ctx, lambda client: actions.delete_project(client, project_id))

    console.print(f"[bold green]✓ Project {escape(project_id)} deleted.[/bold green]")
    show_board(result.board)
