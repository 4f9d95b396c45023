"""Helpers shared by the CLI command groups."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import json
from typing import Any, TypeVar

from rich.console import Console
from rich.markup import escape
import typer

from tracker_client.board import Board
from tracker_client.client import TrackerAPIClient, get_api_client
from tracker_client.errors import ActionError
from tracker_client.render import render_board

T = TypeVar("T")

console = Console()


@dataclass
class CLIState:
    api_url: str | None = None


def run_with_client(ctx: typer.Context, func: Callable[[TrackerAPIClient], Awaitable[T]]) -> T:
    """Run ``func`` with a fresh API client, closing it afterwards."""
    state: CLIState = ctx.obj or CLIState()

    async def _main() -> T:
        async with get_api_client(state.api_url) as client:
            return await func(client)

    return asyncio.run(_main())


def run_action(ctx: typer.Context, func: Callable[[TrackerAPIClient], Awaitable[T]]) -> T:
    """Like run_with_client, but report ActionError and exit 1."""
    try:
        return run_with_client(ctx, func)
    except ActionError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from None


def echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


def show_board(board: Board | None) -> None:
    if board is not None:
        console.print(render_board(board))


def confirm_or_abort(message: str, yes: bool) -> None:
    if yes:
        return
    if not typer.confirm(message, default=False):
        console.print("Aborted.")
        raise typer.Exit(code=0)
