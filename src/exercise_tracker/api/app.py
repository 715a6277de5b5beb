"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.users import router as users_router
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import parse_cors_origins
from exercise_tracker.containers import AppContainer

WELCOME_TEXT = "Welcome to the Exercise Tracker API"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Exercise tracker API starting (environment=%s)",
            container.settings.environment,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Exercise Tracker API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(users_router)

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        """Greeting for the API root."""
        return WELCOME_TEXT

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
