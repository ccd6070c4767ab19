"""JSON codec for the animal collection.

Why JSON with a `$type` discriminator:
- Human-readable, diffable file that other tools can read.
- The tag keeps variant identity; decoding dispatches on it through the same
  Pydantic validators used for direct construction.
"""

from __future__ import annotations

import json
from typing import Iterable

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.domain.errors import FormatError
from core.domain.models import Animal, AnimalRecord

_COLLECTION = TypeAdapter(list[AnimalRecord])
DISCRIMINATOR = "$type"


def encode_animals(animals: Iterable[Animal]) -> str:
    """Render the collection as a pretty-printed UTF-8 JSON array."""

    payload = [animal.model_dump(mode="json", by_alias=True) for animal in animals]
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def decode_animals(text: str) -> list[Animal]:
    """Parse a JSON array of tagged records.

    Raises `FormatError` on invalid JSON, a non-array document, a missing or
    unknown `$type`, or fields that fail validation. A `null` document is an
    empty collection.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatError(f"Invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise FormatError(f"Expected a JSON array of animals, got {type(data).__name__}.")

    for index, item in enumerate(data):
        if isinstance(item, dict) and DISCRIMINATOR not in item:
            raise FormatError(f"Record {index} has no {DISCRIMINATOR!r} discriminator.")

    # File keys are aliases only; Python field names are for construction.
    try:
        return list(_COLLECTION.validate_python(data, by_alias=True, by_name=False))
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise FormatError(f"Malformed animal record(s): {problems}") from exc
