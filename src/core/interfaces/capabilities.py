"""Optional animal capabilities.

These behaviors carry no persisted state; callers check them with
`isinstance(animal, Flyable)` before offering the action.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Feedable(Protocol):
    def feed(self, food: str) -> str: ...


@runtime_checkable
class Flyable(Protocol):
    def fly(self) -> str: ...
