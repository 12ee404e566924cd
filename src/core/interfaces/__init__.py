"""Core contracts (Protocol).

- Each module defines one capability contract.
- Concrete types in `core.domain` and `adapters` conform structurally, without
  inheriting from the protocol.
"""

from core.interfaces.animal import Animal
from core.interfaces.named import FullyNamed
from core.interfaces.random_source import GeneratesRandomNumbers

__all__ = [
    "Animal",
    "FullyNamed",
    "GeneratesRandomNumbers",
]
