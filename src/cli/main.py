"""Command-line entry point.

With a sub-command, runs it and prints markdown to stdout. Without one,
starts the MCP server over stdio, which is how MCP clients launch it.
"""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console

from cli import doctor
from cli.state import CliState, get_state
from core.config import AppSettings
from core.domain.models import ContentStatus, SpaceStatus, SpaceType
from core.logging_config import setup_app_logging
from core.services.pages_controller import ListPagesOptions
from core.services.responses import ControllerResponse
from core.services.spaces_controller import ListSpacesOptions
from mcp_server import McpTransport, serve

NAME = "confluence-mcp"
VERSION = "0.1.0"

app = typer.Typer(
    name=NAME,
    help="Atlassian Confluence from the command line, or as an MCP server when run without a command.",
    invoke_without_command=True,
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console(soft_wrap=True, highlight=False, emoji=False)
_err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{NAME} {VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState(settings=_load_settings())
    state: CliState = ctx.obj
    setup_app_logging(state.settings)

    if ctx.invoked_subcommand is None:
        serve(state.settings)


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        _err_console.print(f"Error loading configuration: {problems}", markup=False)
        raise typer.Exit(code=1) from exc


def _emit(result: ControllerResponse) -> None:
    if result.is_error:
        _err_console.print(result.content, markup=False)
        raise typer.Exit(code=1)
    _console.print(result.content, markup=False)


@app.command("list-spaces")
def list_spaces(
    ctx: typer.Context,
    type: SpaceType | None = typer.Option(None, "--type", "-t", help="Filter spaces by type."),
    status: SpaceStatus | None = typer.Option(None, "--status", "-s", help="Filter spaces by status."),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-l",
        min=1,
        max=250,
        help="Limit the number of spaces returned.",
    ),
) -> None:
    """List Confluence spaces."""

    controllers = get_state(ctx).controllers()
    options = ListSpacesOptions(type=type, status=status, limit=limit)
    _emit(asyncio.run(controllers.spaces.list(options)))


@app.command("get-space")
def get_space(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="ID of the space to retrieve."),
) -> None:
    """Get details about a specific Confluence space."""

    controllers = get_state(ctx).controllers()
    _emit(asyncio.run(controllers.spaces.get(space_id)))


@app.command("list-pages")
def list_pages(
    ctx: typer.Context,
    space_id: str | None = typer.Option(None, "--space-id", help="Only pages of this space ID."),
    status: ContentStatus | None = typer.Option(None, "--status", "-s", help="Filter pages by status."),
    title: str | None = typer.Option(None, "--title", help="Exact page title to match."),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-l",
        min=1,
        max=250,
        help="Limit the number of pages returned.",
    ),
) -> None:
    """List Confluence pages."""

    controllers = get_state(ctx).controllers()
    options = ListPagesOptions(space_id=space_id, status=status, title=title, limit=limit)
    _emit(asyncio.run(controllers.pages.list(options)))


@app.command("get-page")
def get_page(
    ctx: typer.Context,
    page_id: str = typer.Argument(..., help="ID of the page to retrieve."),
) -> None:
    """Get details and content of a specific Confluence page."""

    controllers = get_state(ctx).controllers()
    _emit(asyncio.run(controllers.pages.get(page_id)))


@app.command("serve")
def serve_command(
    ctx: typer.Context,
    transport: McpTransport = typer.Option(McpTransport.STDIO, "--transport", help="MCP transport."),
) -> None:
    """Start the MCP server."""

    serve(get_state(ctx).settings, transport=transport)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
