import pytest

from bricks import create_app
from bricks.extensions import db


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    # tokens travel in the Authorization header only
    return app.test_client(use_cookies=False)


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, user_type, email, name="Test User", password="secret123"):
    resp = client.post("/api/auth/register", json={
        "name": name,
        "email": email,
        "password": password,
        "user_type": user_type,
    })
    assert resp.status_code == 201, resp.get_json()
    return auth_headers(resp.get_json()["token"])


def profile_id(client, headers):
    return client.get("/api/auth/me", headers=headers).get_json()["profile"]["id"]


def create_linked_student(client, personal_headers, email="student@example.com", name="Linked Student", **extra):
    """Student created by a personal; returns (headers, student_id)."""
    resp = client.post("/api/students/create", headers=personal_headers, json={
        "name": name, "email": email, **extra,
    })
    assert resp.status_code == 201, resp.get_json()
    body = resp.get_json()
    login = client.post("/api/auth/login", json={"email": email, "password": body["temporary_password"]})
    assert login.status_code == 200
    return auth_headers(login.get_json()["token"]), body["student"]["id"]


@pytest.fixture
def personal_headers(client):
    return register(client, "personal", "coach@example.com", name="Coach Carter")


@pytest.fixture
def student_headers(client):
    return register(client, "student", "solo@example.com", name="Solo Student")
