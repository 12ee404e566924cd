"""Contract: things that have a full name."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FullyNamed(Protocol):
    """Anyone adopting this contract exposes a read-only `full_name`.

    Conforming types decide how the value is produced: stored as-is or derived
    from other fields on every access.
    """

    @property
    def full_name(self) -> str:
        ...
