"""Domain primitives that enforce validity at creation time."""

from collections.abc import Container
from dataclasses import dataclass
from typing import Self
from uuid import uuid4


@dataclass(frozen=True)
class EventId:
    """Opaque unique identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Event ID cannot be blank")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    @classmethod
    def generate(cls, taken: Container[Self] = ()) -> Self:
        """Return a fresh ID that is not in ``taken``."""
        while True:
            candidate = cls(value=uuid4().hex)
            if candidate not in taken:
                return candidate

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
