from datetime import datetime, timedelta

import pytest

from bricks.extensions import db
from bricks.models import Notification
from bricks.services.notifications import dispatch_due, recurring_occurrence, resolve_group

from tests.conftest import create_linked_student, profile_id, register


def _message(**extra):
    payload = {"title": "Heads up", "message": "Training moved to the park today."}
    payload.update(extra)
    return payload


def _inbox_titles(client, headers):
    return [n["title"] for n in client.get("/api/notifications/inbox", headers=headers).get_json()]


def test_send_to_student(client, personal_headers):
    student_headers, student_id = create_linked_student(client, personal_headers)
    resp = client.post("/api/notifications/send", headers=personal_headers, json=_message(
        recipient_type="student", recipient_id=student_id,
    ))
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["recipients"] == 1
    assert body["notification"]["status"] == "sent"
    assert body["notification"]["sender_name"] == "Coach Carter"

    assert _inbox_titles(client, student_headers) == ["Heads up"]
    assert [n["id"] for n in client.get("/api/notifications", headers=personal_headers).get_json()] == [
        body["notification"]["id"]
    ]


def test_send_to_foreign_student(client, personal_headers):
    other = register(client, "personal", "other@example.com")
    _, foreign_id = create_linked_student(client, other)
    resp = client.post("/api/notifications/send", headers=personal_headers, json=_message(
        recipient_type="student", recipient_id=foreign_id,
    ))
    assert resp.status_code == 404


def test_send_to_group(client, personal_headers):
    first, _ = create_linked_student(client, personal_headers, email="a@example.com")
    second, _ = create_linked_student(client, personal_headers, email="b@example.com")
    outsider = register(client, "student", "loner@example.com")

    resp = client.post("/api/notifications/send", headers=personal_headers, json=_message(
        recipient_type="group", recipient_group="all_active",
    ))
    assert resp.get_json()["recipients"] == 2
    assert _inbox_titles(client, first) == ["Heads up"]
    assert _inbox_titles(client, second) == ["Heads up"]
    assert _inbox_titles(client, outsider) == []


def test_recipient_validation(client, personal_headers):
    no_id = client.post("/api/notifications/send", headers=personal_headers, json=_message(recipient_type="student"))
    assert no_id.status_code == 400
    assert no_id.get_json()["msg"] == "recipient_id is required for student notifications"

    no_group = client.post("/api/notifications/send", headers=personal_headers, json=_message(recipient_type="group"))
    assert no_group.get_json()["msg"] == "recipient_group is required for group notifications"

    short = client.post("/api/notifications/send", headers=personal_headers, json={
        "title": "Hi", "message": "Yo", "recipient_type": "group", "recipient_group": "all_active",
    })
    assert short.get_json()["msg"] == "Message must be at least 5 characters"

    channel = client.post("/api/notifications/send", headers=personal_headers, json=_message(
        recipient_type="group", recipient_group="all_active", channel="sms",
    ))
    assert channel.status_code == 400


def test_students_cannot_send(client, student_headers):
    resp = client.post("/api/notifications/send", headers=student_headers, json=_message(
        recipient_type="group", recipient_group="all_active",
    ))
    assert resp.status_code == 403


def test_schedule_and_cancel(client, personal_headers):
    student_headers, student_id = create_linked_student(client, personal_headers)

    past = client.post("/api/notifications/schedule", headers=personal_headers, json=_message(
        recipient_type="student", recipient_id=student_id, scheduled_at="2020-01-01T10:00:00",
    ))
    assert past.status_code == 400
    assert past.get_json()["msg"] == "scheduled_at must be in the future"

    when = (datetime.utcnow() + timedelta(days=2)).replace(microsecond=0).isoformat()
    created = client.post("/api/notifications/schedule", headers=personal_headers, json=_message(
        recipient_type="student", recipient_id=student_id, scheduled_at=when,
    ))
    assert created.status_code == 201
    notification = created.get_json()["notification"]
    assert notification["status"] == "pending"

    scheduled = client.get("/api/notifications/scheduled", headers=personal_headers).get_json()
    assert [n["id"] for n in scheduled] == [notification["id"]]
    assert client.get("/api/notifications/stats", headers=personal_headers).get_json()["scheduled"] == 1
    assert _inbox_titles(client, student_headers) == []

    cancelled = client.post(f"/api/notifications/{notification['id']}/cancel", headers=personal_headers)
    assert cancelled.get_json()["notification"]["status"] == "cancelled"
    again = client.post(f"/api/notifications/{notification['id']}/cancel", headers=personal_headers)
    assert again.status_code == 400


def test_dispatch_sends_due_scheduled(client, personal_headers):
    student_headers, student_id = create_linked_student(client, personal_headers)
    when = datetime.utcnow() + timedelta(hours=1)
    created = client.post("/api/notifications/schedule", headers=personal_headers, json=_message(
        recipient_type="student", recipient_id=student_id, scheduled_at=when.isoformat(),
    )).get_json()["notification"]

    assert dispatch_due(now=datetime.utcnow()) == 0
    assert dispatch_due(now=when + timedelta(minutes=1)) == 1
    assert db.session.get(Notification, created["id"]).status == "sent"
    assert _inbox_titles(client, student_headers) == ["Heads up"]

    assert dispatch_due(now=when + timedelta(minutes=2)) == 0


def test_recurring_lifecycle(client, personal_headers):
    create_linked_student(client, personal_headers)
    weekly_without_days = client.post("/api/notifications/recurring", headers=personal_headers, json=_message(
        recipient_type="group", recipient_group="all_active", recurring_frequency="weekly", recurring_time="08:00",
    ))
    assert weekly_without_days.status_code == 400

    bad_time = client.post("/api/notifications/recurring", headers=personal_headers, json=_message(
        recipient_type="group", recipient_group="all_active", recurring_frequency="daily", recurring_time="25:00",
    ))
    assert bad_time.get_json()["msg"] == "recurring_time must be HH:MM"

    created = client.post("/api/notifications/recurring", headers=personal_headers, json=_message(
        recipient_type="group", recipient_group="all_active", recurring_frequency="weekly",
        recurring_time="07:30", recurring_days=[1, 3, 5],
    ))
    assert created.status_code == 201
    notification_id = created.get_json()["notification"]["id"]
    assert created.get_json()["notification"]["recurring_days"] == [1, 3, 5]

    assert len(client.get("/api/notifications/recurring", headers=personal_headers).get_json()) == 1
    assert client.get("/api/notifications", headers=personal_headers).get_json() == []

    paused = client.post(f"/api/notifications/{notification_id}/pause", headers=personal_headers)
    assert paused.get_json()["notification"]["status"] == "paused"
    assert client.post(f"/api/notifications/{notification_id}/pause", headers=personal_headers).status_code == 400
    resumed = client.post(f"/api/notifications/{notification_id}/resume", headers=personal_headers)
    assert resumed.get_json()["notification"]["status"] == "sent"

    assert client.post(f"/api/notifications/{notification_id}/cancel", headers=personal_headers).status_code == 400
    assert client.delete(f"/api/notifications/{notification_id}", headers=personal_headers).status_code == 200
    assert client.get("/api/notifications/recurring", headers=personal_headers).get_json() == []


def test_only_recurring_can_be_deleted(client, personal_headers):
    sent = client.post("/api/notifications/send", headers=personal_headers, json=_message(
        recipient_type="group", recipient_group="all_active",
    )).get_json()["notification"]
    assert client.delete(f"/api/notifications/{sent['id']}", headers=personal_headers).status_code == 400

    other = register(client, "personal", "other@example.com")
    assert client.delete(f"/api/notifications/{sent['id']}", headers=other).status_code == 403


def test_dispatch_recurring_once_per_occurrence(client, personal_headers):
    student_headers, _ = create_linked_student(client, personal_headers)
    created = client.post("/api/notifications/recurring", headers=personal_headers, json=_message(
        recipient_type="group", recipient_group="all_active", recurring_frequency="daily", recurring_time="00:00",
    )).get_json()["notification"]

    tomorrow = datetime.utcnow().replace(hour=0, minute=30, second=0, microsecond=0) + timedelta(days=1)
    assert dispatch_due(now=tomorrow) == 1
    assert dispatch_due(now=tomorrow + timedelta(minutes=5)) == 0
    assert db.session.get(Notification, created["id"]).last_sent_at == tomorrow
    assert _inbox_titles(client, student_headers) == ["Heads up"]


def test_stats_count_sent_today(client, personal_headers):
    client.post("/api/notifications/send", headers=personal_headers, json=_message(
        recipient_type="group", recipient_group="all_active",
    ))
    stats = client.get("/api/notifications/stats", headers=personal_headers).get_json()
    assert stats == {"sent_today": 1, "scheduled": 0}


def _recurring(frequency="daily", days=None, created_at=datetime(2030, 1, 1, 7, 0), **extra):
    return Notification(
        type="recurring",
        status="sent",
        recurring_frequency=frequency,
        recurring_time="08:00",
        recurring_days=days,
        created_at=created_at,
        **extra,
    )


def test_recurring_occurrence_daily():
    notification = _recurring()
    assert recurring_occurrence(notification, datetime(2030, 1, 2, 9, 0)) == datetime(2030, 1, 2, 8, 0)
    assert recurring_occurrence(notification, datetime(2030, 1, 2, 7, 59)) is None

    notification.last_sent_at = datetime(2030, 1, 2, 8, 0, 30)
    assert recurring_occurrence(notification, datetime(2030, 1, 2, 9, 0)) is None


def test_recurring_occurrence_weekly_uses_sunday_zero():
    # 2030-01-02 is a Wednesday
    assert recurring_occurrence(_recurring("weekly", [3]), datetime(2030, 1, 2, 9, 0)) is not None
    assert recurring_occurrence(_recurring("weekly", [1]), datetime(2030, 1, 2, 9, 0)) is None


def test_recurring_occurrence_monthly_follows_creation_day():
    notification = _recurring("monthly")
    assert recurring_occurrence(notification, datetime(2030, 2, 1, 9, 0)) == datetime(2030, 2, 1, 8, 0)
    assert recurring_occurrence(notification, datetime(2030, 2, 2, 9, 0)) is None


def test_paused_recurring_never_fires():
    notification = _recurring()
    notification.status = "paused"
    assert recurring_occurrence(notification, datetime(2030, 1, 2, 9, 0)) is None


def test_occurrence_before_creation_is_skipped():
    notification = _recurring(created_at=datetime(2030, 1, 2, 8, 30))
    assert recurring_occurrence(notification, datetime(2030, 1, 2, 9, 0)) is None


def test_resolve_groups(client, personal_headers):
    pid = profile_id(client, personal_headers)
    create_linked_student(client, personal_headers)
    client.post("/api/students/generate-link", headers=personal_headers)

    assert len(resolve_group(pid, "all_active")) == 1
    assert len(resolve_group(pid, "new_students")) == 1
    assert len(resolve_group(pid, "inactive_30d")) == 1
    assert resolve_group(pid, "new_students", now=datetime.utcnow() + timedelta(days=60)) == []
    with pytest.raises(ValueError):
        resolve_group(pid, "vip")


def test_inactive_group_only_counts_own_workouts(client, personal_headers):
    student_headers, student_id = create_linked_student(client, personal_headers)
    workout = client.post("/api/workouts", headers=personal_headers, json={"name": "Leg Day"}).get_json()["workout"]
    assignment = client.post("/api/student-workouts", headers=personal_headers, json={
        "student_id": student_id, "workout_id": workout["id"], "start_date": "2030-01-01T00:00:00",
    }).get_json()["assignment"]
    done = client.patch(f"/api/student-workouts/{assignment['id']}/complete", headers=student_headers, json={})
    assert done.status_code == 200
    assert resolve_group(profile_id(client, personal_headers), "inactive_30d") == []

    new_headers = register(client, "personal", "new-coach@example.com")
    new_pid = profile_id(client, new_headers)
    moved = client.patch("/api/students/me", headers=student_headers, json={"personal_id": new_pid})
    assert moved.status_code == 200
    assert [s.id for s in resolve_group(new_pid, "inactive_30d")] == [student_id]
