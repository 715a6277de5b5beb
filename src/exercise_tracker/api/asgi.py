"""ASGI entrypoint for the exercise tracker API."""

from exercise_tracker.api.app import create_app
from exercise_tracker.containers import build_container

app = create_app(build_container())
