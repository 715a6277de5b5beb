"""Supabase repository for exercises."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from exercise_tracker.domain.exercises import LogQuery
from exercise_tracker.domain.models import ExerciseRecord
from exercise_tracker.services.exercises import ExerciseRepository

_COLUMNS = "id, user_id, description, duration, date"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise persistence."""

    client: Client

    def create_exercise(
        self, user_id: UUID, description: str, duration: int, on: date
    ) -> ExerciseRecord:
        """Create an exercise row and return it."""
        response = (
            self.client.table("exercises")
            .insert(
                {
                    "user_id": str(user_id),
                    "description": description,
                    "duration": duration,
                    "date": on.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create exercise in Supabase")
        return _parse_exercise(response.data[0])

    def list_exercises(self, user_id: UUID, query: LogQuery) -> list[ExerciseRecord]:
        """Return exercises for a user within the query's date range."""
        request = (
            self.client.table("exercises")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
        )
        if query.from_date is not None:
            request = request.gte("date", query.from_date.isoformat())
        if query.to_date is not None:
            request = request.lte("date", query.to_date.isoformat())
        request = request.order("date", desc=False).order("created_at", desc=False)
        if query.limit is not None:
            request = request.limit(query.limit)
        response = request.execute()
        return [_parse_exercise(row) for row in response.data or []]


def _parse_exercise(row: dict[str, object]) -> ExerciseRecord:
    return ExerciseRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        description=str(row.get("description", "")),
        duration=int(row.get("duration", 0)),
        date=date.fromisoformat(str(row["date"])),
    )
