from pydantic import ValidationError
import typer

from tracker_client.commands import board, project, task
from tracker_client.commands.common import CLIState, console
from tracker_client.config import get_settings
from tracker_client.logging import setup_logging

app = typer.Typer(
    name="tracker",
    help="Project/task tracker client",
    add_completion=False,
)


@app.callback()
def callback(
    ctx: typer.Context,
    api_url: str | None = typer.Option(
        None, "--api-url", help="Tracker backend URL (overrides TRACKER_API_URL)"
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """
    Project Tracker CLI
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            console.print(f"[bold red]Invalid configuration:[/bold red] {field}: {err['msg']}")
        raise typer.Exit(code=1) from None

    if api_url and api_url.rstrip("/").endswith("/api"):
        console.print("[bold red]Invalid configuration:[/bold red] --api-url must not include /api")
        raise typer.Exit(code=1)

    setup_logging(
        service_name=settings.service_name,
        log_format=settings.log_format,
        log_level=log_level or settings.log_level,
    )
    ctx.obj = CLIState(api_url=api_url)


app.add_typer(project.app, name="project", help="Manage projects")
app.add_typer(task.app, name="task", help="Manage tasks")
app.command()(board.board)
app.command()(board.sync)


if __name__ == "__main__":
    app()
