"""Protocols Playground CLI (Typer).

Every command builds concrete values and hands them to code that only knows
the contracts.
"""

from __future__ import annotations

import json
import logging
from enum import Enum

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.random_source import build_random_source
from cli import doctor
from cli.ui_components import build_contracts_table, print_banner
from core.config import AppSettings
from core.domain.models import Cat, Dog, Person, StarShip
from core.interfaces import Animal
from core.registry import conformance_matrix
from core.services.consumers import make_animals_speak, print_full_names
from core.services.playground import build_named_things, run_playground

app = typer.Typer(
    no_args_is_help=True,
    help="Capability contracts (Protocol) playground: conformance, contract-typed collections, equality.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

logger = logging.getLogger(__name__)

NO_PREFIX = "-"


class AnimalKind(str, Enum):
    CAT = "cat"
    DOG = "dog"


_ANIMALS: dict[AnimalKind, type[Cat] | type[Dog]] = {
    AnimalKind.CAT: Cat,
    AnimalKind.DOG: Dog,
}


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main(
    ctx: typer.Context,
    banner: bool | None = typer.Option(
        None,
        "--banner/--no-banner",
        help="Show the welcome banner (defaults to PROTOCOLS_PLAYGROUND_SHOW_BANNER).",
    ),
) -> None:
    settings = _load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings

    show = settings.show_banner if banner is None else banner
    if show:
        print_banner(_console)


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else _load_settings()


@app.command(name="run")
def run_walkthrough(ctx: typer.Context) -> None:
    """Run the full walkthrough: names, a random draw, ship equality, a cat."""

    settings = _settings(ctx)
    result = run_playground(generator=build_random_source(settings))
    logger.debug("playground result: %s", result.model_dump())


@app.command()
def names(
    as_json: bool = typer.Option(False, "--json", help="Emit the named things as JSON."),
) -> None:
    """Print the full names of a mixed Person/StarShip list."""

    things = build_named_things()
    if as_json:
        payload = [thing.model_dump(mode="json") for thing in things]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))
        return
    print_full_names(things, emit=typer.echo)


@app.command(name="random")
def random_numbers(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=1, max=1000, help="How many numbers to draw."),
) -> None:
    """Draw numbers from the one-through-ten generator, one per line."""

    generator = build_random_source(_settings(ctx))
    for _ in range(count):
        typer.echo(str(generator.random()))


@app.command()
def speak(
    animal: AnimalKind = typer.Argument(..., help="Which animal speaks."),
    legs: int = typer.Option(4, "--legs", help="Number of legs (non-negative)."),
) -> None:
    """Build an animal and let it speak."""

    try:
        speaker: Animal = _ANIMALS[animal](number_of_legs=legs)
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid animal: {exc.errors()[0]['msg']}", param_hint="--legs") from exc
    make_animals_speak([speaker])


@app.command()
def compare(
    prefix_a: str = typer.Argument(..., help=f"Prefix of the first ship ('{NO_PREFIX}' for none)."),
    name_a: str = typer.Argument(..., help="Name of the first ship."),
    prefix_b: str = typer.Argument(..., help=f"Prefix of the second ship ('{NO_PREFIX}' for none)."),
    name_b: str = typer.Argument(..., help="Name of the second ship."),
) -> None:
    """Compare two starships by full name."""

    first = StarShip(prefix=None if prefix_a == NO_PREFIX else prefix_a, name=name_a)
    second = StarShip(prefix=None if prefix_b == NO_PREFIX else prefix_b, name=name_b)
    if first == second:
        typer.echo("They are the same")
    else:
        typer.echo("They are different")


@app.command()
def contracts(ctx: typer.Context) -> None:
    """Show which built-in types satisfy which contracts."""

    samples = [
        Person(full_name="Rich"),
        StarShip(prefix="USS", name="Enterprise"),
        build_random_source(_settings(ctx)),
        Cat(number_of_legs=4),
        Dog(number_of_legs=4),
    ]
    _console.print(build_contracts_table(conformance_matrix(samples)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
