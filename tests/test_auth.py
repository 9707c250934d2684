from tests.conftest import auth_headers, register


def test_register_personal_creates_profile(client):
    resp = client.post("/api/auth/register", json={
        "name": "  Coach Carter ",
        "email": "Coach@Example.com",
        "password": "secret123",
        "user_type": "personal",
    })
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["user"]["email"] == "coach@example.com"
    assert body["user"]["name"] == "Coach Carter"
    assert body["token"]

    me = client.get("/api/auth/me", headers=auth_headers(body["token"])).get_json()
    assert me["user"]["user_type"] == "personal"
    assert me["profile"]["specialties"] == []


def test_register_student_is_approved_and_unlinked(client):
    headers = register(client, "student", "s@example.com")
    profile = client.get("/api/auth/me", headers=headers).get_json()["profile"]
    assert profile["registration_status"] == "approved"
    assert profile["personal_id"] is None


def test_register_duplicate_email(client):
    register(client, "personal", "dup@example.com")
    resp = client.post("/api/auth/register", json={
        "name": "Other", "email": "DUP@example.com", "password": "secret123", "user_type": "student",
    })
    assert resp.status_code == 400
    assert resp.get_json()["msg"] == "Email already registered"


def test_register_validation_reports_first_error(client):
    resp = client.post("/api/auth/register", json={
        "name": "Ok Name", "email": "x@example.com", "password": "123", "user_type": "personal",
    })
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["msg"] == "Password must be at least 6 characters"
    assert "password" in body["errors"]


def test_register_rejects_unknown_user_type(client):
    resp = client.post("/api/auth/register", json={
        "name": "Ok Name", "email": "x@example.com", "password": "secret123", "user_type": "admin",
    })
    assert resp.status_code == 400


def test_login(client):
    register(client, "personal", "coach@example.com", password="secret123")

    ok = client.post("/api/auth/login", json={"email": "COACH@example.com", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.get_json()["token"]

    bad = client.post("/api/auth/login", json={"email": "coach@example.com", "password": "wrong-pass"})
    assert bad.status_code == 401
    assert bad.get_json()["msg"] == "Invalid email or password"


def test_login_sets_access_cookie(app):
    client = app.test_client()
    register(client, "personal", "cookie@example.com")
    resp = client.post("/api/auth/login", json={"email": "cookie@example.com", "password": "secret123"})
    assert "access_token_cookie" in resp.headers.get("Set-Cookie", "")


def test_me_requires_token(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.get_json()["msg"] == "Missing authorization token"


def test_invalid_token(client):
    resp = client.get("/api/auth/me", headers=auth_headers("not-a-token"))
    assert resp.status_code == 401


def test_change_password(client):
    headers = register(client, "personal", "coach@example.com", password="secret123")

    missing = client.post("/api/auth/change-password", headers=headers, json={"new_password": "newsecret"})
    assert missing.status_code == 400
    assert missing.get_json()["msg"] == "Current password is required"

    wrong = client.post("/api/auth/change-password", headers=headers, json={
        "current_password": "nope", "new_password": "newsecret",
    })
    assert wrong.get_json()["msg"] == "Current password is incorrect"

    ok = client.post("/api/auth/change-password", headers=headers, json={
        "current_password": "secret123", "new_password": "newsecret",
    })
    assert ok.status_code == 200
    login = client.post("/api/auth/login", json={"email": "coach@example.com", "password": "newsecret"})
    assert login.status_code == 200


def test_temporary_password_can_be_replaced_without_current(client, personal_headers):
    created = client.post("/api/students/create", headers=personal_headers, json={
        "name": "New Student", "email": "new@example.com",
    }).get_json()
    login = client.post("/api/auth/login", json={
        "email": "new@example.com", "password": created["temporary_password"],
    }).get_json()
    assert login["user"]["must_change_password"] is True

    headers = auth_headers(login["token"])
    resp = client.post("/api/auth/change-password", headers=headers, json={"new_password": "chosen123"})
    assert resp.status_code == 200
    me = client.get("/api/auth/me", headers=headers).get_json()
    assert me["user"]["must_change_password"] is False


def test_logout(client):
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200


def test_update_me(client, personal_headers):
    resp = client.patch("/api/users/me", headers=personal_headers, json={
        "name": "Renamed Coach", "photo_url": "https://example.com/p.jpg",
    })
    assert resp.status_code == 200
    assert resp.get_json()["user"]["name"] == "Renamed Coach"

    short = client.patch("/api/users/me", headers=personal_headers, json={"name": "R"})
    assert short.status_code == 400


def test_unknown_route_is_json(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "msg" in resp.get_json()
