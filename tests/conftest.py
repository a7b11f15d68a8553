import os

# must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.core.db import Base, engine
from app.main import app


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"User {counter['n']}",
            "email": f"user{counter['n']}@example.com",
            "password": "secret123",
        }
        payload.update(overrides)
        resp = client.post("/users", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_media(client):
    def _make(**overrides):
        payload = {
            "title": "The Matrix",
            "type": "movie",
            "releaseYear": 1999,
            "genre": "sci-fi",
        }
        payload.update(overrides)
        resp = client.post("/media", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
