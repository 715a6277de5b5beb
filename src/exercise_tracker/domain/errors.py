"""Error types raised by the exercise tracker services."""

from http import HTTPStatus


class ExerciseTrackerError(Exception):
    """Base error carrying a caller-safe message and an HTTP status."""

    http_status: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ExerciseTrackerError):
    """A referenced record does not exist."""

    http_status = HTTPStatus.NOT_FOUND


class ServerError(ExerciseTrackerError):
    """The store or other infrastructure failed while handling a request."""

    http_status = HTTPStatus.INTERNAL_SERVER_ERROR
