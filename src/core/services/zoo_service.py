"""Zoo registry service.

This module owns the in-memory collection and is the only place that
mutates it. Storage is delegated to an `AnimalRepository`, so the same
service runs against a JSON file (CLI) or an in-memory double (tests).

Callers with more than one thread must serialize access with their own lock.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from core.domain.errors import InvalidArgumentError
from core.domain.models import Animal
from core.interfaces.repository import AnimalRepository

logger = logging.getLogger(__name__)


class ZooService:
    """Ordered registry of animals backed by a repository."""

    def __init__(self, repository: AnimalRepository, seed: Iterable[Animal] | None = None) -> None:
        if repository is None:
            raise InvalidArgumentError("repository is required")
        self._repository = repository
        self._animals: list[Animal] = list(seed) if seed is not None else []

    def __len__(self) -> int:
        return len(self._animals)

    def add(self, animal: Animal) -> None:
        if animal is None:
            raise InvalidArgumentError("animal is required")
        self._animals.append(animal)

    def list_animals(self) -> tuple[Animal, ...]:
        """Read-only snapshot in insertion order."""

        return tuple(self._animals)

    def make_all_sounds(self) -> Iterator[str]:
        """Lazily yield `<species> <name>: <sound>`; each call starts over."""

        return (animal.sound_line() for animal in list(self._animals))

    def save(self) -> None:
        self._repository.save(list(self._animals))

    def load(self) -> None:
        """Replace the collection with the repository's content.

        The repository is read first; if it raises, the current collection is
        left exactly as it was.
        """

        loaded = self._repository.load()
        discarded = len(self._animals)
        self._animals = list(loaded)
        logger.info("Loaded %d animal(s), replacing %d in memory", len(self._animals), discarded)
