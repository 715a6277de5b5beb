"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """Represents a logged exercise stored in the database."""

    id: UUID
    user_id: UUID
    description: str
    duration: int
    date: date
