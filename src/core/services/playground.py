"""The playground walkthrough as a single reusable function.

Steps, in order:
1. A `Person` and a `StarShip` (renamed after construction) go into one
   `FullyNamed` list whose names are printed.
2. One number is drawn from a `GeneratesRandomNumbers` source.
3. Two starships are compared by full name.
4. A `Cat` speaks.

Only steps 1 and 4 write to stdout.
"""

from __future__ import annotations

import logging

from adapters.random_source import OneThroughTen
from core.domain.models import Cat, Person, PlaygroundResult, StarShip
from core.interfaces import Animal, FullyNamed, GeneratesRandomNumbers
from core.services.consumers import make_animals_speak, print_full_names

logger = logging.getLogger(__name__)


def build_named_things() -> tuple[Person, StarShip]:
    """The person and the renamed starship used by the walkthrough."""

    me = Person(full_name="Rich")
    enterprise = StarShip(prefix="USS", name="Enterprise")
    enterprise.name = "Lambda"
    return me, enterprise


def run_playground(*, generator: GeneratesRandomNumbers | None = None) -> PlaygroundResult:
    """Run the walkthrough and return a summary of it.

    Names and the sound both go through `print`; standard output receives
    exactly three lines: `Rich`, `USS Lambda` and `Meow`.
    """

    me, enterprise = build_named_things()
    fully_named_things: list[FullyNamed] = [me, enterprise]
    serenity = StarShip(prefix=None, name="Firefly")

    printed = print_full_names(fully_named_things)

    generator = generator or OneThroughTen()
    number = generator.random()

    same = serenity == enterprise
    logger.debug("%r == %r -> %s", serenity.full_name, enterprise.full_name, same)

    my_cat = Cat(number_of_legs=4)
    animals: list[Animal] = [my_cat]
    make_animals_speak(animals)

    return PlaygroundResult(
        printed_names=printed,
        random_number=number,
        ships_equal=same,
        animal_sound=my_cat.sound,
    )
