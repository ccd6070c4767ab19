"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at construction time, with the very same validators
  reused when records are decoded from disk.
- The closed set of variants becomes a discriminated union on `$type`, so
  decoding dispatches on the tag instead of guessing from the fields.

Note:
- These models describe *what* an animal is, not *where* it is stored.
- Invalid input raises `pydantic.ValidationError` (re-exported as
  `core.domain.errors.ValidationError`).
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Iterable, Literal, Union

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator, model_validator
from pydantic.config import ConfigDict

SILENCE = "(silence)"
UNKNOWN_WORD = "(doesn't know this word)"


def normalize_vocabulary(words: Iterable[str]) -> tuple[str, ...]:
    """Trim, drop blanks and case-insensitive duplicates (first one wins)."""

    seen: set[str] = set()
    result: list[str] = []
    for word in words:
        cleaned = word.strip()
        if not cleaned:
            continue
        key = cleaned.casefold()
        if key in seen:
            continue
        seen.add(key)
        result.append(cleaned)
    return tuple(result)


class Animal(BaseModel):
    """Base record shared by every variant.

    Why frozen:
    - Records are handed to the registry by value; nobody mutates them after
      construction, so invariants checked once stay true.
    """

    model_config = ConfigDict(frozen=True, validate_by_name=True, validate_by_alias=True, extra="ignore")

    species_name: ClassVar[str] = ""
    sound: ClassVar[str] = ""
    feed_verb: ClassVar[str] = "eats"

    kind: str = Field(
        ...,
        alias="$type",
        description="Discriminator naming the variant in persisted data.",
    )
    name: StrictStr = Field(
        ...,
        alias="Name",
        description="Display name; trimmed, never blank.",
    )
    age: StrictInt = Field(
        ...,
        ge=0,
        alias="Age",
        description="Age in years.",
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required.")
        return value

    @model_validator(mode="after")
    def _concrete_variant_only(self) -> "Animal":
        if type(self) is Animal:
            raise ValueError("Animal is abstract; build a Lion, Parrot or Snake.")
        return self

    def species(self) -> str:
        return self.species_name

    def make_sound(self) -> str:
        return self.sound

    def sound_line(self) -> str:
        """Line used by the registry: `<species> <name>: <sound>`."""

        return f"{self.species()} {self.name}: {self.make_sound()}"

    def feed(self, food: str) -> str:
        """Describe the animal eating `food`. No state changes."""

        return f"{self.name} {self.feed_verb} {food}."

    def __str__(self) -> str:
        return f"{self.species()} '{self.name}', age {self.age}"


class Lion(Animal):
    species_name: ClassVar[str] = "Lion"
    sound: ClassVar[str] = "Roar"

    kind: Literal["lion"] = Field(default="lion", alias="$type")
    is_alpha: StrictBool = Field(
        ...,
        alias="IsAlpha",
        description="Leader of the pride.",
    )


class Parrot(Animal):
    species_name: ClassVar[str] = "Parrot"
    sound: ClassVar[str] = "Squawk"
    feed_verb: ClassVar[str] = "pecks"

    kind: Literal["parrot"] = Field(default="parrot", alias="$type")
    vocabulary: tuple[StrictStr, ...] = Field(
        ...,
        alias="Vocabulary",
        description="Known words, normalized at construction.",
    )

    @field_validator("vocabulary", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("vocabulary")
    @classmethod
    def _normalize(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return normalize_vocabulary(value)

    def speak(self, index: int) -> str:
        """Return the word at `index`, or a sentinel. Never raises."""

        if not self.vocabulary:
            return SILENCE
        if not isinstance(index, int) or isinstance(index, bool):
            return UNKNOWN_WORD
        if index < 0 or index >= len(self.vocabulary):
            return UNKNOWN_WORD
        return self.vocabulary[index]

    def fly(self) -> str:
        return f"{self.name} flies around."


class Snake(Animal):
    species_name: ClassVar[str] = "Snake"
    sound: ClassVar[str] = "Hiss"
    feed_verb: ClassVar[str] = "swallows"

    kind: Literal["snake"] = Field(default="snake", alias="$type")
    is_venomous: StrictBool = Field(
        ...,
        alias="IsVenomous",
        description="Whether the bite is venomous.",
    )


AnimalRecord = Annotated[Union[Lion, Parrot, Snake], Field(discriminator="kind")]


def default_seed() -> list[Animal]:
    """The three residents used by `zoo seed` and `seed_on_empty`."""

    return [
        Lion(name="Simba", age=5, is_alpha=True),
        Parrot(name="Polly", age=2, vocabulary=["Hello", "Cracker"]),
        Snake(name="Nagini", age=4, is_venomous=True),
    ]
