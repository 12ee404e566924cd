"""Contract registry.

Maps contract names to their protocols so conformance can be checked by name
at runtime (`isinstance` against `@runtime_checkable` protocols).

Note: runtime checks only confirm that the required members exist, not their
types or signatures.
"""

from __future__ import annotations

from typing import Any, Iterable

from core.interfaces import Animal, FullyNamed, GeneratesRandomNumbers

CONTRACTS: dict[str, type] = {
    "FullyNamed": FullyNamed,
    "GeneratesRandomNumbers": GeneratesRandomNumbers,
    "Animal": Animal,
}


def get_contract(name: str) -> type:
    try:
        return CONTRACTS[name]
    except KeyError:
        known = ", ".join(sorted(CONTRACTS))
        raise KeyError(f"unknown contract {name!r} (known: {known})") from None


def conforms_to(value: Any, contract_name: str) -> bool:
    """True when `value` provides every member the named contract requires."""

    return isinstance(value, get_contract(contract_name))


def conformance_matrix(values: Iterable[Any]) -> dict[str, list[str]]:
    """Type label -> names of the contracts that type's value satisfies.

    Values of the same type share one row; the first one seen wins. Labels are
    the qualified class name, prefixed with the module when two distinct types
    share it.
    """

    matrix: dict[str, list[str]] = {}
    labels: dict[type, str] = {}
    for value in values:
        cls = type(value)
        if cls in labels:
            continue
        label = cls.__qualname__
        if label in matrix:
            label = f"{cls.__module__}.{cls.__qualname__}"
        labels[cls] = label
        matrix[label] = [name for name, proto in CONTRACTS.items() if isinstance(value, proto)]
    return matrix
