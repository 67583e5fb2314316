"""CLI principal (Typer).

Por qué Typer:
- Subcomandos tipados sin boilerplate de argparse.
- Cada comando delega en `core.services`; aquí solo hay I/O de consola.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console

from adapters.html_document import SoupDocument
from adapters.registration_client import RegistrationClient
from adapters.storage import JsonFileKeyValueStore
from cli import doctor
from cli.ui_components import build_token_panel, build_validation_table, print_banner
from core.config import AppSettings
from core.domain.errors import AuthBootstrapError
from core.domain.models import Credentials
from core.logging import configure_logging
from core.services.heading import update_main_heading
from core.services.signup_flow import sign_up
from core.services.token_store import TokenStore
from core.services.validation import validate_form

app = typer.Typer(no_args_is_help=True, help="Client-side authentication bootstrap.")
token_app = typer.Typer(no_args_is_help=True, help="Inspect or clear the stored token.")
app.add_typer(token_app, name="token")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _token_store(settings: AppSettings) -> TokenStore:
    store = JsonFileKeyValueStore(settings.resolved_storage_path())
    return TokenStore(store, key=settings.token_key)


def _fail(message: str) -> None:
    _console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging(settings.log_level, debug_mode=verbose)


@app.command()
def validate(
    email: str = typer.Argument(..., help="Email to check."),
    password: str = typer.Option("", "--password", "-p", help="Password to check."),
) -> None:
    """Validate an email/password pair without contacting the service."""

    result = validate_form(email, password)
    _console.print(build_validation_table(result))
    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command()
def register(
    email: str = typer.Argument(..., help="Noroff email address."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Public user name."),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Account password."
    ),
    html: Optional[Path] = typer.Option(
        None, "--html", exists=True, dir_okay=False, help="HTML file whose heading is updated."
    ),
) -> None:
    """Register a new account and store the issued token."""

    settings = AppSettings()
    print_banner(_console)

    document = SoupDocument.from_path(html) if html else None
    try:
        result = asyncio.run(
            sign_up(
                Credentials(email=email, password=password),
                name=name,
                registrar=RegistrationClient(settings),
                token_store=_token_store(settings),
                document=document,
                heading_selector=settings.heading_selector,
            )
        )
    except AuthBootstrapError as exc:
        _fail(str(exc))
        return
    except httpx.HTTPError as exc:
        _fail(f"Could not reach {settings.api_base_url}: {exc.__class__.__name__}")
        return

    if not result.validation.is_valid:
        _console.print(build_validation_table(result.validation))
        raise typer.Exit(code=1)

    for warning in result.warnings:
        _console.print(f"[yellow]{warning}[/yellow]")
    if document is not None and html is not None:
        if result.heading_updated:
            document.write(html)
            _console.print(f"[green]Heading updated in:[/green] {html}")
        else:
            _console.print(
                f"[yellow]No element matches {settings.heading_selector!r}; {html} left as is.[/yellow]"
            )
    _console.print("[green]Registration succeeded.[/green]")


@token_app.command("show")
def token_show() -> None:
    """Print the stored token."""

    settings = AppSettings()
    try:
        token = _token_store(settings).get_token()
    except AuthBootstrapError as exc:
        _fail(str(exc))
        return
    _console.print(build_token_panel(token))


@token_app.command("clear")
def token_clear() -> None:
    """Remove every entry from the persistent store."""

    settings = AppSettings()
    _token_store(settings).clear_storage()
    _console.print("[green]Storage cleared.[/green]")


@app.command()
def heading(
    html: Path = typer.Argument(..., exists=True, dir_okay=False, help="HTML file to edit."),
    text: str = typer.Argument(..., help="New heading text."),
) -> None:
    """Rewrite the main heading of an HTML file."""

    settings = AppSettings()
    document = SoupDocument.from_path(html)
    if document.query_selector(settings.heading_selector) is None:
        _console.print(f"[yellow]No element matches {settings.heading_selector!r}; file left as is.[/yellow]")
        return
    update_main_heading(text, document, selector=settings.heading_selector)
    document.write(html)
    _console.print(f"[green]Heading updated in:[/green] {html}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
