"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__
    return True, f"HTTP {response.status_code}"


def _check_storage(path: Path) -> tuple[bool, str]:
    """Check that the storage directory accepts writes."""

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=path.parent, prefix=".doctor-"):
            pass
    except OSError as exc:
        return False, str(exc)
    return True, str(path)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="auth-bootstrap Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Token key", "OK", settings.token_key)
    table.add_row("Heading selector", "OK", settings.heading_selector)

    ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    ok_storage, detail_storage = _check_storage(settings.resolved_storage_path())
    table.add_row("Storage", "OK" if ok_storage else "FAIL", detail_storage)

    _console.print(table)

    if not ok_storage:
        _console.print(
            "\n[yellow]Note:[/yellow] Set AUTH_BOOTSTRAP_STORAGE_PATH to a writable location."
        )


@app.command(name="set-api")
def set_api(
    base_url: str = typer.Argument(..., help="Base URL of the authentication service."),
) -> None:
    """Store the API base URL in the user config .env."""

    base_url = base_url.strip()
    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base_url must start with http:// or https://")

    env_path = write_user_env_vars({"AUTH_BOOTSTRAP_API_BASE_URL": base_url})
    _console.print(f"[green]Saved API config to:[/green] {env_path}")
