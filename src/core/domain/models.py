"""Domain models (Pydantic v2).

Concrete types that adopt the core contracts:
- `Person` and `StarShip` conform to `FullyNamed`.
- `Cat` and `Dog` conform to `Animal`.

None of them inherit from the protocols; conformance is structural.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field, computed_field


class Person(BaseModel):
    """A person whose full name is stored as given."""

    full_name: str = Field(
        ...,
        description="Full name, stored verbatim.",
    )


class StarShip(BaseModel):
    """A starship named by an optional prefix plus a name.

    `full_name` is derived on every access, so assigning a new `name` (or
    `prefix`) to a live instance is reflected immediately.
    """

    prefix: str | None = Field(
        default=None,
        description="Optional registry prefix (e.g. 'USS'). Not every ship has one.",
    )
    name: str = Field(
        ...,
        description="Ship name.",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def full_name(self) -> str:
        if self.prefix is not None:
            return f"{self.prefix} {self.name}"
        return self.name

    def __eq__(self, other: object) -> bool:
        # Ships compare by their derived full name, not field by field:
        # StarShip(prefix="USS", name="X") == StarShip(name="USS X").
        if not isinstance(other, StarShip):
            return NotImplemented
        return self.full_name == other.full_name


class _SpeakingAnimal(BaseModel):
    """Shared fields for the animals below.

    Subclasses only set `sound`.
    """

    sound: ClassVar[str]

    number_of_legs: int = Field(
        ...,
        ge=0,
        description="Number of legs (non-negative).",
    )

    def speak(self) -> None:
        print(self.sound)


class Cat(_SpeakingAnimal):
    sound: ClassVar[str] = "Meow"


class Dog(_SpeakingAnimal):
    sound: ClassVar[str] = "Woof"


class PlaygroundResult(BaseModel):
    """Summary of a playground run: printed names, the draw, the comparison and
    the species sound of the animal that spoke.
    """

    printed_names: list[str] = Field(
        default_factory=list,
        description="Full names printed by the contract-typed loop, in order.",
    )
    random_number: int = Field(
        ...,
        ge=1,
        le=10,
        description="Value drawn from the one-through-ten generator.",
    )
    ships_equal: bool = Field(
        ...,
        description="Outcome of comparing the two starships.",
    )
    animal_sound: str = Field(
        ...,
        description="Species sound of the animal that spoke (its `sound`).",
    )
