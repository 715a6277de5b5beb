"""Exercise logging business logic."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.exercises import ExerciseLog, LogQuery
from exercise_tracker.domain.models import ExerciseRecord, UserRecord
from exercise_tracker.services.users import UserService


class ExerciseRepository(Protocol):
    """Persistence interface for exercises."""

    def create_exercise(
        self, user_id: UUID, description: str, duration: int, on: date
    ) -> ExerciseRecord:
        """Create and return a new exercise record."""

    def list_exercises(self, user_id: UUID, query: LogQuery) -> list[ExerciseRecord]:
        """Return a user's exercises ordered by date, filtered by the query."""


def _utc_today() -> date:
    return datetime.now(tz=UTC).date()


@dataclass
class ExerciseService:
    """Service for adding exercises and reading exercise logs."""

    user_service: UserService
    repository: ExerciseRepository
    today: Callable[[], date] = field(default=_utc_today)

    def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: int,
        on: date | None = None,
    ) -> tuple[UserRecord, ExerciseRecord]:
        """Log an exercise for an existing user.

        The user is resolved first so nothing is written for unknown ids.
        ``on`` defaults to the current UTC date.
        """
        user = self.user_service.get_user(user_id)
        exercise = self.repository.create_exercise(
            user_id=user.id,
            description=description,
            duration=duration,
            on=on or self.today(),
        )
        return user, exercise

    def get_log(self, user_id: str, query: LogQuery | None = None) -> ExerciseLog:
        """Return the user's exercises matching the query."""
        user = self.user_service.get_user(user_id)
        entries = self.repository.list_exercises(user.id, query or LogQuery())
        return ExerciseLog(user=user, entries=entries)
