"""Animal repository contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The registry can be tested against an in-memory double and run against a
  JSON file without knowing which one it holds.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from core.domain.models import Animal


@runtime_checkable
class AnimalRepository(Protocol):
    """Whole-collection storage boundary.

    Design rules:
    - Both operations move the full collection; no incremental appends.
    - Implementations never keep a reference to the caller's list.
    """

    def load(self) -> list[Animal]:
        """Return a fresh list; empty when nothing was stored yet."""

        ...

    def save(self, animals: Iterable[Animal]) -> None:
        """Replace whatever was stored with `animals`."""

        ...
