"""HTTP-level checks that do not need a database: wiring, auth guards and request validation."""

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from kforum.main import app
from kforum.utils.auth_utils import get_current_user, is_admin


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _login_as(role):
    app.dependency_overrides[get_current_user] = lambda: {"_id": ObjectId(), "role": role}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "OK"


def test_wordle_requires_a_token(client):
    r = client.get("/wordle/today")
    assert r.status_code in (401, 403)


def test_admin_routes_reject_students(client):
    _login_as("student")
    assert client.get("/admin/posts/pending").status_code == 403
    assert client.post("/wordle/admin/regenerate").status_code == 403


def test_unknown_category_is_rejected(client):
    _login_as("student")
    r = client.post("/posts", json={"title": "Hi", "content": "Hello", "category": "memes"})
    assert r.status_code == 422


def test_unknown_reaction_is_rejected(client):
    _login_as("student")
    r = client.post(f"/posts/{ObjectId()}/react", json={"type": "meh"})
    assert r.status_code == 422


def test_set_word_length_is_validated(client):
    _login_as("admin")
    r = client.post("/wordle/admin/set-word", json={"word": "toolong"})
    assert r.status_code == 422


def test_is_admin():
    assert is_admin({"role": "admin"})
    assert is_admin({"role": "moderator"})
    assert is_admin({"is_admin": True})
    assert not is_admin({"role": "student"})
    assert not is_admin({})
