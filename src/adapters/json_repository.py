"""File-backed animal repository.

Why a class and not module helpers:
- The path is injected, so the CLI, tests and future tools can point the
  registry at any file.
- It satisfies `AnimalRepository`, which keeps the service storage-agnostic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from adapters.json_codec import decode_animals, encode_animals
from core.domain.errors import FormatError
from core.domain.models import Animal

logger = logging.getLogger(__name__)


class JsonAnimalRepository:
    """Stores the whole collection in a single JSON file.

    Notes:
    - A missing file loads as an empty collection.
    - `save` overwrites in a single write; there is no atomic-rename step.
    - `OSError` propagates unchanged; undecodable bytes and decode failures
      raise `FormatError`.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> list[Animal]:
        if not self.path.exists():
            logger.debug("No data file at %s; starting empty", self.path)
            return []
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                text = fh.read()
        except UnicodeDecodeError as exc:
            raise FormatError(f"{self.path} is not valid UTF-8 (byte offset {exc.start}).") from exc
        animals = decode_animals(text)
        logger.debug("Loaded %d animal(s) from %s", len(animals), self.path)
        return animals

    def save(self, animals: Iterable[Animal]) -> None:
        # Encode before opening so a serialization failure never truncates the file.
        snapshot = list(animals)
        payload = encode_animals(snapshot)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as fh:
            fh.write(payload)
        logger.debug("Saved %d animal(s) to %s", len(snapshot), self.path)
