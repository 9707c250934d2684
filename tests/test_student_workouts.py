from tests.conftest import create_linked_student, register


def _workout(client, headers, name="Leg Day"):
    resp = client.post("/api/workouts", headers=headers, json={
        "name": name, "exercises": [{"exercise_name": "Squat", "sets": 5, "reps": 5}],
    })
    return resp.get_json()["workout"]["id"]


def _assign(client, headers, student_id, workout_id, **extra):
    return client.post("/api/student-workouts", headers=headers, json={
        "student_id": student_id, "workout_id": workout_id, "start_date": "2030-01-01T00:00:00", **extra,
    })


def test_assign_and_complete(client, personal_headers):
    student_headers, student_id = create_linked_student(client, personal_headers)
    workout_id = _workout(client, personal_headers)

    resp = _assign(client, personal_headers, student_id, workout_id)
    assert resp.status_code == 201
    assignment = resp.get_json()["assignment"]
    assert assignment["status"] == "active"
    assert assignment["workout"]["exercises"][0]["exercise_name"] == "Squat"

    mine = client.get("/api/student-workouts", headers=student_headers).get_json()
    assert [a["id"] for a in mine] == [assignment["id"]]
    # students see their assignments from the workouts list too
    assert client.get("/api/workouts", headers=student_headers).get_json()[0]["workout_id"] == workout_id

    done = client.patch(f"/api/student-workouts/{assignment['id']}/complete", headers=student_headers, json={
        "feedback": "Tough but good",
    })
    body = done.get_json()["assignment"]
    assert body["status"] == "completed"
    assert body["feedback"] == "Tough but good"
    assert body["completed_at"]

    stats = client.get("/api/students/stats", headers=student_headers).get_json()
    assert stats["completed_workouts"] == 1
    assert stats["weekly_progress"] == 100


def test_assign_checks_ownership(client, personal_headers):
    _, student_id = create_linked_student(client, personal_headers)
    other = register(client, "personal", "other@example.com")
    foreign_workout = _workout(client, other)
    own_workout = _workout(client, personal_headers)

    assert _assign(client, personal_headers, student_id, foreign_workout).status_code == 403
    assert _assign(client, personal_headers, student_id, 999).status_code == 404
    assert _assign(client, personal_headers, 999, own_workout).status_code == 404

    _, other_student = create_linked_student(client, other, email="theirs@example.com")
    resp = _assign(client, personal_headers, other_student, own_workout)
    assert resp.status_code == 403
    assert resp.get_json()["msg"] == "Student is not linked to you"


def test_assign_date_order(client, personal_headers):
    _, student_id = create_linked_student(client, personal_headers)
    workout_id = _workout(client, personal_headers)
    resp = _assign(client, personal_headers, student_id, workout_id, end_date="2029-12-01T00:00:00")
    assert resp.status_code == 400


def test_assignment_visibility(client, personal_headers):
    student_headers, student_id = create_linked_student(client, personal_headers)
    intruder_headers, _ = create_linked_student(client, personal_headers, email="intruder@example.com")
    assignment_id = _assign(
        client, personal_headers, student_id, _workout(client, personal_headers)
    ).get_json()["assignment"]["id"]

    assert client.get(f"/api/student-workouts/{assignment_id}", headers=student_headers).status_code == 200
    assert client.get(f"/api/student-workouts/{assignment_id}", headers=personal_headers).status_code == 200
    assert client.get(f"/api/student-workouts/{assignment_id}", headers=intruder_headers).status_code == 403
    assert client.patch(
        f"/api/student-workouts/{assignment_id}/complete", headers=intruder_headers, json={}
    ).status_code == 403


def test_personal_changes_status(client, personal_headers):
    _, student_id = create_linked_student(client, personal_headers)
    assignment_id = _assign(
        client, personal_headers, student_id, _workout(client, personal_headers)
    ).get_json()["assignment"]["id"]
    url = f"/api/student-workouts/{assignment_id}/status"

    completed = client.patch(url, headers=personal_headers, json={"status": "completed"}).get_json()["assignment"]
    assert completed["completed_at"]
    paused = client.patch(url, headers=personal_headers, json={"status": "paused"}).get_json()["assignment"]
    assert paused["status"] == "paused"
    assert paused["completed_at"] is None

    invalid = client.patch(url, headers=personal_headers, json={"status": "archived"})
    assert invalid.status_code == 400
    assert invalid.get_json()["msg"] == "Invalid status"

    listed = client.get("/api/student-workouts", headers=personal_headers).get_json()
    assert [a["id"] for a in listed] == [assignment_id]
