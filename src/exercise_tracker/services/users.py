"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.errors import NotFoundError
from exercise_tracker.domain.models import UserRecord

USER_NOT_FOUND = "User not found"


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    def list_users(self) -> list[UserRecord]:
        """Return every stored user in insertion order."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create_user(self, username: str) -> UserRecord:
        """Persist a new user and return it."""
        return self.repository.create_user(username)

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        return self.repository.list_users()

    def get_user(self, user_id: str) -> UserRecord:
        """Return the user for a raw id, raising ``NotFoundError`` if absent."""
        try:
            parsed = UUID(user_id)
        except ValueError as exc:
            raise NotFoundError(USER_NOT_FOUND) from exc
        user = self.repository.get_user(parsed)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user
