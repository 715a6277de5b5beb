"""User and exercise log endpoints."""

import datetime as dt
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, Query, Request

from exercise_tracker.api.error_handlers import store_errors
from exercise_tracker.api.request_body import parse_body
from exercise_tracker.api.schemas import (
    AddExerciseRequest,
    CreateUserRequest,
    ExerciseLogResponse,
    ExerciseResponse,
    UserResponse,
)
from exercise_tracker.domain.exercises import LogQuery

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


def _container(request: Request) -> "AppContainer":
    return request.app.state.container


@router.post("")
def create_user(
    request: Request,
    body: Annotated[CreateUserRequest, Depends(parse_body(CreateUserRequest))],
) -> UserResponse:
    """Create a user from a username."""
    with store_errors("Server error saving user"):
        user = _container(request).user_service.create_user(body.username)
    return UserResponse.from_record(user)


@router.get("")
def list_users(request: Request) -> list[UserResponse]:
    """Return every user."""
    with store_errors("Server error fetching users"):
        users = _container(request).user_service.list_users()
    return [UserResponse.from_record(user) for user in users]


@router.post("/{user_id}/exercises")
def add_exercise(
    user_id: str,
    request: Request,
    body: Annotated[AddExerciseRequest, Depends(parse_body(AddExerciseRequest))],
) -> ExerciseResponse:
    """Log an exercise for a user."""
    with store_errors("Server error adding exercise"):
        user, exercise = _container(request).exercise_service.add_exercise(
            user_id=user_id,
            description=body.description,
            duration=body.duration,
            on=body.date,
        )
    return ExerciseResponse.from_records(user, exercise)


@router.get("/{user_id}/logs")
def get_log(
    user_id: str,
    request: Request,
    from_date: Annotated[dt.date | None, Query(alias="from")] = None,
    to_date: Annotated[dt.date | None, Query(alias="to")] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
) -> ExerciseLogResponse:
    """Return a user's exercise log filtered by date range and limit."""
    query = LogQuery(from_date=from_date, to_date=to_date, limit=limit)
    with store_errors("Server error retrieving exercise log"):
        log = _container(request).exercise_service.get_log(user_id, query)
    return ExerciseLogResponse.from_log(log)
