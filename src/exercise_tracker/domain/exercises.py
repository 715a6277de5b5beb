"""Domain models for exercise logs."""

from dataclasses import dataclass, field
from datetime import date

from exercise_tracker.domain.models import ExerciseRecord, UserRecord

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True)
class LogQuery:
    """Optional filters applied when reading a user's exercise log."""

    from_date: date | None = None
    to_date: date | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 1:
            raise ValueError("limit must be a positive integer")


@dataclass(frozen=True)
class ExerciseLog:
    """A user's exercises after filtering and limiting."""

    user: UserRecord
    entries: list[ExerciseRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)


def format_display_date(value: date) -> str:
    """Format a date as weekday, month, day and year, e.g. ``Mon Jan 01 2024``."""
    weekday = _WEEKDAYS[value.weekday()]
    month = _MONTHS[value.month - 1]
    return f"{weekday} {month} {value.day:02d} {value.year:04d}"
