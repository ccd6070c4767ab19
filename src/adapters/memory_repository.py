"""In-memory animal repository (test double, scratch sessions)."""

from __future__ import annotations

from typing import Iterable

from core.domain.models import Animal


class InMemoryAnimalRepository:
    """Keeps a snapshot tuple; never shares the caller's list."""

    def __init__(self, animals: Iterable[Animal] = ()) -> None:
        self._stored: tuple[Animal, ...] = tuple(animals)
        self.save_count = 0

    def load(self) -> list[Animal]:
        return list(self._stored)

    def save(self, animals: Iterable[Animal]) -> None:
        self._stored = tuple(animals)
        self.save_count += 1
