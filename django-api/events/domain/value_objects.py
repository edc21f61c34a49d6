"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RegistrationId:
    """Unique identifier for a Registration."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RollNumber:
    """Student roll number, stripped of surrounding whitespace."""

    value: str

    def __post_init__(self) -> None:
        stripped = self.value.strip()
        if not stripped:
            raise ValueError("Roll number cannot be blank")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class YearOfStudy:
    """Positive integer year of study."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Year of study must be at least 1")

    @classmethod
    def parse(cls, raw: int | str) -> Self:
        return cls(value=int(str(raw).strip()))


class Role(Enum):
    """Account role stored on the user profile."""

    STUDENT = "student"
    ADMIN = "admin"

    @classmethod
    def parse(cls, raw: str | None) -> "Role":
        """Normalize a stored or requested role; blank means student."""
        normalized = (raw or "student").strip().lower()
        return cls(normalized)
