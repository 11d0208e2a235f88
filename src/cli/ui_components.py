"""Componentes de UI para CLI (Rich).

Separa la lógica de comandos de los detalles visuales.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import FieldOutcome


def print_banner(console: Console) -> None:
    title = Text("clientcheck", style="bold cyan")
    subtitle = Text("UUID • CPF/CNPJ • Email MX • Phone numbering plan", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_outcomes_table(outcomes: Iterable[FieldOutcome]) -> Table:
    """Tabla Rich con un resultado por campo."""

    table = Table(title="Client validation")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Code", style="magenta")
    table.add_column("Details", style="dim")

    for outcome in outcomes:
        status = "[green]PASS[/green]" if outcome.passed else "[red]FAIL[/red]"
        details = outcome.message or outcome.detail or ""
        table.add_row(outcome.field, status, outcome.code or "", details)
    return table
