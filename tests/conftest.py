import pytest

from config import TestingConfig
from workout_tracker import create_app, db


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield


def register_and_login(client, username="alice", email="alice@x.com", password="Secret1!"):
    """Register a user through the API and return (user_id, auth headers)."""
    resp = client.post(
        "/api/register",
        json={"username": username, "email": email, "password": password, "fullName": username.title()},
    )
    assert resp.status_code == 201, resp.get_json()
    user_id = resp.get_json()["userId"]

    resp = client.post("/api/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.get_json()
    token = resp.get_json()["token"]
    return user_id, {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    return register_and_login(client)


@pytest.fixture
def bob(client):
    return register_and_login(client, username="bob", email="bob@x.com", password="Hunter22!")


SQUATS = {
    "exerciseName": "Squats",
    "sets": 4,
    "reps": 15,
    "weight": 135,
    "duration": 20,
    "difficulty": "hard",
    "workoutDate": "2025-10-21",
    "workoutTime": "18:00",
    "notes": "Legs are burning!",
}
