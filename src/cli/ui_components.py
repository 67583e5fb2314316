"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ValidationResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("auth-bootstrap", style="bold cyan")
    subtitle = Text("Validación • Registro • Token", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_validation_table(result: ValidationResult, *, fields: tuple[str, ...] = ("email", "password")) -> Table:
    """Tabla campo -> OK/mensaje de error."""

    table = Table(title="Form validation")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Message", style="red")
    for name in fields:
        message = result.errors.get(name)
        table.add_row(name, "INVALID" if message else "OK", message or "")
    return table


def build_token_panel(token: Any | None) -> Panel:
    """Panel con el token almacenado (o su ausencia)."""

    if token is None:
        return Panel(Text("No token stored.", style="dim"), title="Token", border_style="yellow")
    return Panel(Text(str(token)), title="Token", border_style="green")
