"""Contract: sources of random integers.

The contract only names the operation. Each adopter picks its own generator
and range.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GeneratesRandomNumbers(Protocol):
    def random(self) -> int:
        """Return one random integer drawn by the adopter."""

        ...
