"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.confluence import SpacesService
from adapters.observers import NullObserver
from cli.state import CliState, get_state
from core.config import CREDENTIAL_ENV_VARS, AppSettings, get_user_env_file, missing_credentials, write_user_env_vars
from core.domain.params import ListSpacesParams

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(state: CliState) -> tuple[bool, str]:
    service = SpacesService(state.settings, observer=NullObserver(), client=state.client)
    try:
        spaces = await service.list(ListSpacesParams(limit=1))
    except Exception as exc:
        return False, str(exc)
    visible = "at least one space" if spaces.results else "no spaces"
    return True, f"Authenticated, {visible} visible"


def _mask(value: str) -> str:
    if len(value) <= 4:
        return "****"
    return f"{value[:2]}{'*' * (len(value) - 4)}{value[-2:]}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    state = get_state(ctx)
    settings: AppSettings = state.settings
    missing = missing_credentials(settings)

    table = Table(title="confluence-mcp Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    values = {
        "ATLASSIAN_SITE_NAME": settings.atlassian_site_name,
        "ATLASSIAN_USER_EMAIL": settings.atlassian_user_email,
        "ATLASSIAN_API_TOKEN": _mask(settings.atlassian_api_token or ""),
    }
    for name in CREDENTIAL_ENV_VARS:
        if name in missing:
            table.add_row(name, "MISSING", "Run `confluence-mcp doctor setup` or export it")
        else:
            table.add_row(name, "OK", str(values[name]))
    table.add_row("Debug logging", "ON" if settings.debug else "OFF", "DEBUG")

    ok_api = False
    if missing:
        table.add_row("Confluence API", "SKIPPED", "Credentials incomplete")
    else:
        ok_api, detail_api = asyncio.run(_check_api(state))
        table.add_row("Confluence API", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if missing or not ok_api:
        _console.print(f"\n[yellow]Note:[/yellow] user config file: {get_user_env_file()}")
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive credential setup (stores config in the user config .env)."""

    site = typer.prompt("Atlassian site name (<site>.atlassian.net)").strip()
    email = typer.prompt("Atlassian account email").strip()
    token = typer.prompt("Atlassian API token", hide_input=True, confirmation_prompt=False).strip()

    site = site.removeprefix("https://").removesuffix("/").removesuffix(".atlassian.net")
    if not site or not email or not token:
        raise typer.BadParameter("site name, email and API token are required")

    env_path = write_user_env_vars(
        {
            "ATLASSIAN_SITE_NAME": site,
            "ATLASSIAN_USER_EMAIL": email,
            "ATLASSIAN_API_TOKEN": token,
        }
    )

    _console.print(f"[green]Saved Atlassian credentials to:[/green] {env_path}")
