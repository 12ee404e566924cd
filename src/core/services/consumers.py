"""Contract-typed consumers.

These helpers only touch the members a contract requires, so any conforming
value works, whatever its concrete type.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from core.interfaces import Animal, FullyNamed

logger = logging.getLogger(__name__)


def print_full_names(
    things: Iterable[FullyNamed],
    *,
    emit: Callable[[str], None] = print,
) -> list[str]:
    """Print each `full_name` in order and return the printed values."""

    printed: list[str] = []
    for thing in things:
        name = thing.full_name
        logger.debug("%s -> %r", type(thing).__name__, name)
        emit(name)
        printed.append(name)
    return printed


def make_animals_speak(animals: Iterable[Animal]) -> int:
    """Call `speak()` on each animal in order; return how many spoke."""

    count = 0
    for animal in animals:
        logger.debug("%s with %d legs speaks", type(animal).__name__, animal.number_of_legs)
        animal.speak()
        count += 1
    return count
