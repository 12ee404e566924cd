"""Doctor command for configuration and contract diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.random_source import build_random_source
from core.config import AppSettings
from core.domain.models import Cat, Dog, Person, StarShip
from core.registry import conforms_to

app = typer.Typer(no_args_is_help=True, help="Configuration and contract diagnostics.")

_console = Console()


def _expected_conformance(settings: AppSettings) -> list[tuple[str, object, str]]:
    return [
        ("Person", Person(full_name="doctor"), "FullyNamed"),
        ("StarShip", StarShip(prefix=None, name="doctor"), "FullyNamed"),
        ("OneThroughTen", build_random_source(settings), "GeneratesRandomNumbers"),
        ("Cat", Cat(number_of_legs=4), "Animal"),
        ("Dog", Dog(number_of_legs=4), "Animal"),
    ]


@app.command()
def run() -> None:
    """Show the effective configuration and verify every built-in type conforms."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    table = Table(title="Protocols Playground Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Log level", "OK", settings.log_level)
    if settings.random_seed is None:
        table.add_row("Random seed", "OK", "unset -> process-wide random source")
    else:
        table.add_row("Random seed", "OK", str(settings.random_seed))

    failures = 0
    for label, value, contract in _expected_conformance(settings):
        ok = conforms_to(value, contract)
        failures += not ok
        table.add_row(f"{label} adopts {contract}", "OK" if ok else "FAIL", type(value).__module__)

    _console.print(table)

    if failures:
        raise typer.Exit(code=1)
