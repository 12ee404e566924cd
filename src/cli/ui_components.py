"""UI components for the CLI (Rich).

Keeps table and panel layout out of the command functions.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.registry import CONTRACTS


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Disabled by default so command output stays pipe-friendly.
    """

    title = Text("Protocols Playground", style="bold cyan")
    subtitle = Text("Contracts • Conformance • Equality", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_contracts_table(matrix: dict[str, list[str]]) -> Table:
    """One row per concrete type, one column per contract."""

    table = Table(title="Contract conformance")
    table.add_column("Type", style="cyan", no_wrap=True)
    for name in CONTRACTS:
        table.add_column(name, justify="center")

    for type_name, satisfied in matrix.items():
        marks = ["[green]yes[/green]" if name in satisfied else "[dim]-[/dim]" for name in CONTRACTS]
        table.add_row(type_name, *marks)
    return table
