from bricks.extensions import db
from bricks.models import Student, User

from tests.conftest import auth_headers, create_linked_student, profile_id, register


def test_create_student_with_temporary_password(client, personal_headers):
    resp = client.post("/api/students/create", headers=personal_headers, json={
        "name": "Alice Lift", "email": "Alice@Example.com", "city": "Curitiba", "student_status": "training",
    })
    assert resp.status_code == 201
    body = resp.get_json()
    assert len(body["temporary_password"]) == 10
    assert body["student"]["user"]["email"] == "alice@example.com"
    assert body["student"]["user"]["must_change_password"] is True
    assert body["student"]["personal_id"] == profile_id(client, personal_headers)

    listed = client.get("/api/students", headers=personal_headers).get_json()
    assert [s["city"] for s in listed] == ["Curitiba"]


def test_create_student_duplicate_email(client, personal_headers):
    create_linked_student(client, personal_headers, email="dup@example.com")
    resp = client.post("/api/students/create", headers=personal_headers, json={
        "name": "Again", "email": "dup@example.com",
    })
    assert resp.status_code == 400


def test_create_student_requires_personal(client, student_headers):
    resp = client.post("/api/students/create", headers=student_headers, json={
        "name": "Nope", "email": "nope@example.com",
    })
    assert resp.status_code == 403


def test_invitation_link_flow(client, personal_headers):
    link = client.post("/api/students/generate-link", headers=personal_headers)
    assert link.status_code == 201
    token = link.get_json()["token"]

    info = client.get(f"/api/students/register/{token}").get_json()
    assert info["personal"]["name"] == "Coach Carter"

    resp = client.post(f"/api/students/register/{token}", json={
        "name": "Invited Ivy", "email": "ivy@example.com", "password": "secret123", "goals": "Run a 10k",
    })
    assert resp.status_code == 201
    headers = auth_headers(resp.get_json()["token"])
    me = client.get("/api/auth/me", headers=headers).get_json()
    assert me["profile"]["id"] == link.get_json()["student_id"]
    assert me["profile"]["goals"] == "Run a 10k"
    assert me["profile"]["registration_status"] == "approved"

    # links are single use
    reused = client.get(f"/api/students/register/{token}")
    assert reused.status_code == 404
    assert reused.get_json()["msg"] == "Invalid or expired registration link"


def test_invitation_unknown_token(client):
    resp = client.post("/api/students/register/bogus", json={
        "name": "Someone", "email": "s@example.com", "password": "secret123",
    })
    assert resp.status_code == 404


def test_approve_and_reject(client, personal_headers):
    _, student_id = create_linked_student(client, personal_headers)

    rejected = client.patch(f"/api/students/{student_id}/reject", headers=personal_headers)
    assert rejected.get_json()["student"]["registration_status"] == "rejected"
    approved = client.patch(f"/api/students/{student_id}/approve", headers=personal_headers)
    assert approved.get_json()["student"]["registration_status"] == "approved"

    other = register(client, "personal", "other@example.com")
    assert client.patch(f"/api/students/{student_id}/approve", headers=other).status_code == 403
    assert client.patch("/api/students/999/approve", headers=personal_headers).status_code == 404


def test_delete_student_removes_account(app, client, personal_headers):
    _, student_id = create_linked_student(client, personal_headers, email="gone@example.com")

    resp = client.delete(f"/api/students/{student_id}", headers=personal_headers)
    assert resp.status_code == 200
    assert db.session.get(Student, student_id) is None
    assert User.query.filter_by(email="gone@example.com").first() is None


def test_delete_pending_invitation(client, personal_headers):
    student_id = client.post("/api/students/generate-link", headers=personal_headers).get_json()["student_id"]
    assert client.delete(f"/api/students/{student_id}", headers=personal_headers).status_code == 200
    assert db.session.get(Student, student_id) is None


def test_student_updates_own_profile(client, personal_headers, student_headers):
    pid = profile_id(client, personal_headers)
    resp = client.patch("/api/students/me", headers=student_headers, json={
        "phone": "+55 11 99999-0000", "birth_date": "1995-04-12", "personal_id": pid,
    })
    assert resp.status_code == 200
    student = resp.get_json()["student"]
    assert student["birth_date"] == "1995-04-12"
    assert student["personal_id"] == pid

    missing = client.patch("/api/students/me", headers=student_headers, json={"personal_id": 999})
    assert missing.status_code == 404


def test_student_stats(client, personal_headers):
    headers, _ = create_linked_student(client, personal_headers)
    stats = client.get("/api/students/stats", headers=headers).get_json()
    assert stats == {
        "active_workouts": 0,
        "completed_workouts": 0,
        "upcoming_appointments": 0,
        "weekly_progress": 0,
    }
