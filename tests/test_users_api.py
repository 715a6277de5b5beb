"""Tests for the user endpoints."""

from fastapi.testclient import TestClient

from exercise_tracker.api.app import create_app
from tests.conftest import (
    FailingUserRepository,
    InMemoryExerciseRepository,
    InMemoryUserRepository,
    make_container,
)


def test_root_serves_greeting(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Welcome to the Exercise Tracker API"


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.json() == {"status": "ok"}


def test_create_user_returns_username_and_id(
    container, user_repository: InMemoryUserRepository
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/users", json={"username": "fcc_test"})

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"username", "id"}
    assert data["username"] == "fcc_test"
    assert data["id"]
    assert [str(user_id) for user_id in user_repository.users] == [data["id"]]


def test_create_user_accepts_form_body(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/users", data={"username": "form_user"})

    assert response.status_code == 200
    assert response.json()["username"] == "form_user"


def test_create_user_empty_username_rejected(
    container, user_repository: InMemoryUserRepository
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/users", json={"username": ""})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors[0]["field"] == "username"
    assert errors[0]["location"] == "body"
    assert user_repository.users == {}


def test_create_user_missing_body_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/users")

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "username"


def test_create_user_malformed_json_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/users",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["type"] == "json_invalid"


def test_list_users_returns_only_public_fields(container) -> None:
    client = TestClient(create_app(container))
    first = client.post("/api/users", json={"username": "alice"}).json()
    second = client.post("/api/users", json={"username": "bob"}).json()

    response = client.get("/api/users")

    assert response.status_code == 200
    assert response.json() == [first, second]


def test_store_failure_returns_generic_error(settings) -> None:
    container = make_container(
        settings, FailingUserRepository(), InMemoryExerciseRepository()
    )
    client = TestClient(create_app(container))

    create = client.post("/api/users", json={"username": "fcc_test"})
    listing = client.get("/api/users")

    assert create.status_code == 500
    assert create.json() == {"error": "Server error saving user"}
    assert listing.status_code == 500
    assert listing.json() == {"error": "Server error fetching users"}
    assert "10.0.0.5" not in create.text
