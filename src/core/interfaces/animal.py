"""Contract: animals with legs that can speak."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Animal(Protocol):
    """Minimal animal contract.

    Rules:
    - `number_of_legs` is a non-negative integer.
    - `speak` returns nothing; its only effect is one line on stdout.
    """

    number_of_legs: int

    def speak(self) -> None:
        ...
