from datetime import datetime, timedelta

import pytest

from bricks.extensions import db, socketio
from bricks.services.notifications import dispatch_due

from tests.conftest import create_linked_student


def _token(headers):
    return headers["Authorization"].split(" ", 1)[1]


def _pushed(sio):
    return [event for event in sio.get_received() if event["name"] == "notification"]


def _failing_commit():
    raise RuntimeError("database unavailable")


def test_connection_without_token_is_refused(app):
    sio = socketio.test_client(app)
    assert not sio.is_connected()


def test_connection_with_bad_token_is_refused(app):
    sio = socketio.test_client(app, auth={"token": "garbage"})
    assert not sio.is_connected()


def test_notifications_are_pushed_to_the_user_room(app, client, personal_headers):
    student_headers, student_id = create_linked_student(client, personal_headers)
    sio = socketio.test_client(app, auth={"token": _token(student_headers)})
    assert sio.is_connected()

    client.post("/api/notifications/send", headers=personal_headers, json={
        "title": "Heads up", "message": "Training moved to the park today.",
        "recipient_type": "student", "recipient_id": student_id,
    })
    received = _pushed(sio)
    assert len(received) == 1
    assert received[0]["args"][0]["title"] == "Heads up"
    sio.disconnect()


def test_nothing_is_pushed_when_the_send_is_not_saved(app, client, personal_headers, monkeypatch):
    student_headers, student_id = create_linked_student(client, personal_headers)
    sio = socketio.test_client(app, auth={"token": _token(student_headers)})
    sio.get_received()

    monkeypatch.setattr(db.session(), "commit", _failing_commit)
    resp = client.post("/api/notifications/send", headers=personal_headers, json={
        "title": "Heads up", "message": "Training moved to the park today.",
        "recipient_type": "student", "recipient_id": student_id,
    })
    assert resp.status_code == 500
    assert _pushed(sio) == []
    sio.disconnect()


def test_dispatch_pushes_once_after_a_failed_run(app, client, personal_headers, monkeypatch):
    student_headers, student_id = create_linked_student(client, personal_headers)
    when = datetime.utcnow() + timedelta(hours=1)
    client.post("/api/notifications/schedule", headers=personal_headers, json={
        "title": "Reminder", "message": "Bring your water bottle.",
        "recipient_type": "student", "recipient_id": student_id, "scheduled_at": when.isoformat(),
    })
    sio = socketio.test_client(app, auth={"token": _token(student_headers)})
    sio.get_received()

    monkeypatch.setattr(db.session(), "commit", _failing_commit)
    with pytest.raises(RuntimeError):
        dispatch_due(now=when + timedelta(minutes=1))
    assert _pushed(sio) == []

    monkeypatch.undo()
    db.session.rollback()
    assert dispatch_due(now=when + timedelta(minutes=2)) == 1
    received = _pushed(sio)
    assert [event["args"][0]["title"] for event in received] == ["Reminder"]
    sio.disconnect()


def test_token_in_query_string(app, personal_headers):
    sio = socketio.test_client(app, query_string=f"token={_token(personal_headers)}")
    assert sio.is_connected()
    sio.disconnect()
