"""Domain models.

Plain data types that adopt the core contracts. The domain knows nothing about
the CLI or configuration.
"""

from core.domain.models import Cat, Dog, Person, PlaygroundResult, StarShip

__all__ = [
    "Cat",
    "Dog",
    "Person",
    "PlaygroundResult",
    "StarShip",
]
