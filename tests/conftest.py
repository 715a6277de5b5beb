"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

import pytest

from exercise_tracker.config import Settings
from exercise_tracker.containers import AppContainer
from exercise_tracker.domain.exercises import LogQuery
from exercise_tracker.domain.models import ExerciseRecord, UserRecord
from exercise_tracker.services.exercises import ExerciseRepository, ExerciseService
from exercise_tracker.services.users import UserRepository, UserService

FIXED_TODAY = date(2024, 1, 1)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def create_user(self, username: str) -> UserRecord:
        user = UserRecord(id=uuid4(), username=username)
        self.users[user.id] = user
        return user

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)


@dataclass
class InMemoryExerciseRepository(ExerciseRepository):
    """In-memory exercise repository ordered by date, then insertion."""

    exercises: list[ExerciseRecord] = field(default_factory=list)

    def create_exercise(
        self, user_id: UUID, description: str, duration: int, on: date
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=uuid4(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=on,
        )
        self.exercises.append(exercise)
        return exercise

    def list_exercises(self, user_id: UUID, query: LogQuery) -> list[ExerciseRecord]:
        matches = [
            exercise
            for exercise in self.exercises
            if exercise.user_id == user_id
            and (query.from_date is None or exercise.date >= query.from_date)
            and (query.to_date is None or exercise.date <= query.to_date)
        ]
        matches.sort(key=lambda exercise: exercise.date)
        if query.limit is not None:
            return matches[: query.limit]
        return matches


@dataclass
class FailingUserRepository(UserRepository):
    """User repository whose every call fails like an unreachable store."""

    def create_user(self, username: str) -> UserRecord:
        raise ConnectionError("store unreachable at 10.0.0.5")

    def list_users(self) -> list[UserRecord]:
        raise ConnectionError("store unreachable at 10.0.0.5")

    def get_user(self, user_id: UUID) -> UserRecord | None:
        raise ConnectionError("store unreachable at 10.0.0.5")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def exercise_repository() -> InMemoryExerciseRepository:
    return InMemoryExerciseRepository()


def make_container(
    settings: Settings,
    user_repository: UserRepository,
    exercise_repository: ExerciseRepository,
) -> AppContainer:
    user_service = UserService(user_repository)
    exercise_service = ExerciseService(
        user_service=user_service,
        repository=exercise_repository,
        today=lambda: FIXED_TODAY,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        exercise_service=exercise_service,
        close_resources=close_resources,
    )


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    exercise_repository: InMemoryExerciseRepository,
) -> AppContainer:
    return make_container(settings, user_repository, exercise_repository)
