"""Request and response models for the exercise tracker API."""

import datetime as dt

from pydantic import BaseModel, Field, field_validator

from exercise_tracker.domain.exercises import ExerciseLog, format_display_date
from exercise_tracker.domain.models import ExerciseRecord, UserRecord


class CreateUserRequest(BaseModel):
    """Body of ``POST /api/users``."""

    username: str = Field(min_length=1)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


# Postgres ``integer`` column bound.
MAX_DURATION = 2_147_483_647


class AddExerciseRequest(BaseModel):
    """Body of ``POST /api/users/{id}/exercises``."""

    description: str = Field(min_length=1)
    duration: int = Field(ge=1, le=MAX_DURATION)
    date: dt.date | None = None

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("duration", mode="before")
    @classmethod
    def reject_boolean_duration(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("duration must be an integer")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def parse_iso_date(cls, value: object) -> dt.date | None:
        """Parse ISO-8601 text, treating blank input as absent.

        Only the calendar date of a timestamp is kept.
        """
        if value is None:
            return None
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, dt.date):
            return value
        if not isinstance(value, str):
            raise ValueError("date must be an ISO-8601 string")
        cleaned = value.strip()
        if not cleaned:
            return None
        if "T" in cleaned or " " in cleaned:
            return dt.datetime.fromisoformat(cleaned.replace("Z", "+00:00")).date()
        return dt.date.fromisoformat(cleaned)


class UserResponse(BaseModel):
    """Public view of a user."""

    username: str
    id: str

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(username=user.username, id=str(user.id))


class ExerciseResponse(BaseModel):
    """Result of adding an exercise; ``id`` is the owning user's id."""

    username: str
    description: str
    duration: int
    date: str
    id: str

    @classmethod
    def from_records(
        cls, user: UserRecord, exercise: ExerciseRecord
    ) -> "ExerciseResponse":
        return cls(
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=format_display_date(exercise.date),
            id=str(user.id),
        )


class LogEntry(BaseModel):
    """Single exercise inside a log."""

    description: str
    duration: int
    date: str


class ExerciseLogResponse(BaseModel):
    """A user's filtered exercise log."""

    username: str
    count: int
    id: str
    log: list[LogEntry]

    @classmethod
    def from_log(cls, log: ExerciseLog) -> "ExerciseLogResponse":
        return cls(
            username=log.user.username,
            count=log.count,
            id=str(log.user.id),
            log=[
                LogEntry(
                    description=entry.description,
                    duration=entry.duration,
                    date=format_display_date(entry.date),
                )
                for entry in log.entries
            ],
        )
