"""Exception handlers mapping errors to JSON responses."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from exercise_tracker.domain.errors import ExerciseTrackerError, ServerError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Convert unexpected failures into ``ServerError`` with a safe message."""
    try:
        yield
    except ExerciseTrackerError:
        raise
    except Exception as exc:
        logger.exception(message)
        raise ServerError(message) from exc


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""

    @app.exception_handler(ExerciseTrackerError)
    async def tracker_error_handler(
        request: Request, exc: ExerciseTrackerError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=int(exc.http_status), content={"error": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": [_serialize_error(error) for error in exc.errors()]},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def _serialize_error(error: dict[str, object]) -> dict[str, object]:
    loc = tuple(error.get("loc", ()))
    location = str(loc[0]) if loc else "body"
    return {
        "field": ".".join(str(part) for part in loc[1:]),
        "location": location,
        "message": error.get("msg", ""),
        "type": error.get("type", ""),
    }
