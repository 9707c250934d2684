from datetime import date, datetime, timedelta

from bricks.models import Appointment
from bricks.services.dashboard import short_day_name, weekly_productivity
from bricks.utils.dates import month_bounds, utc_today

from tests.conftest import create_linked_student, profile_id


def test_short_day_names():
    # 2030-01-06 is a Sunday
    assert short_day_name(date(2030, 1, 6)) == "Sun"
    assert short_day_name(date(2030, 1, 12)) == "Sat"


def test_weekly_productivity_counts_completed_only():
    today = date(2030, 1, 12)
    appointments = [
        Appointment(start_time=datetime(2030, 1, 12, 9), status="completed"),
        Appointment(start_time=datetime(2030, 1, 12, 11), status="completed"),
        Appointment(start_time=datetime(2030, 1, 10, 9), status="confirmed"),
        Appointment(start_time=datetime(2030, 1, 6, 9), status="completed"),
        Appointment(start_time=datetime(2030, 1, 1, 9), status="completed"),
    ]
    result = weekly_productivity(appointments, today)
    assert [d["day"] for d in result] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert [d["count"] for d in result] == [1, 0, 0, 0, 0, 0, 2]
    assert result[-1]["date"] == "2030-01-12"


def test_dashboard_stats(client, personal_headers):
    today = utc_today()
    create_linked_student(client, personal_headers, email="a@example.com", city="Curitiba",
                          birth_date=today.replace(day=1, year=1990).isoformat())
    create_linked_student(client, personal_headers, email="b@example.com", student_status="single_consultation")
    client.post("/api/students/generate-link", headers=personal_headers)
    client.post("/api/workouts", headers=personal_headers, json={"name": "Full Body"})
    client.post("/api/financial-records", headers=personal_headers, json={
        "type": "income", "category": "Monthly fee", "amount": 400, "date": today.isoformat(),
    })

    stats = client.get("/api/dashboard/stats", headers=personal_headers).get_json()
    assert stats["total_students"] == 2
    assert stats["active_students"] == 2
    assert stats["pending_students"] == 1
    assert stats["active_workouts"] == 1
    assert stats["today_appointments"] == 0
    assert stats["average_rating"] == 0
    assert len(stats["weekly_productivity"]) == 7
    assert stats["weekly_productivity"][-1]["date"] == today.isoformat()
    assert [s["user"]["email"] for s in stats["month_birthdays"]] == ["a@example.com"]

    by_status = {row["status"]: row["count"] for row in stats["students_by_status"]}
    assert by_status == {"training": 1, "single_consultation": 1}
    by_city = {row["city"]: row["count"] for row in stats["students_by_city"]}
    assert by_city == {"Curitiba": 1, "Not informed": 1}
    assert stats["financial_summary"] == {"income": 400, "expenses": 0, "balance": 400, "pending_payments": 0}


def test_invitations_are_not_counted_as_students(client, personal_headers):
    pid = profile_id(client, personal_headers)
    for _ in range(3):
        client.post("/api/students/generate-link", headers=personal_headers)

    assert client.get(f"/api/personals/{pid}").get_json()["student_count"] == 0
    listed = client.get("/api/personals").get_json()
    assert [p["student_count"] for p in listed] == [0]
    assert client.get("/api/personals/stats", headers=personal_headers).get_json()["total_students"] == 0

    stats = client.get("/api/dashboard/stats", headers=personal_headers).get_json()
    assert stats["total_students"] == 0
    assert stats["active_students"] == 0
    assert stats["pending_students"] == 3
    assert stats["students_by_status"] == []
    assert stats["students_by_city"] == []


def test_pending_payments(client, personal_headers):
    first_day, _ = month_bounds(utc_today())
    _, paid_id = create_linked_student(client, personal_headers, email="paid@example.com")
    _, owing_id = create_linked_student(client, personal_headers, email="owing@example.com")
    _, lapsed_id = create_linked_student(client, personal_headers, email="lapsed@example.com")

    def plan(student_id, price, **extra):
        payload = {"student_id": student_id, "plan_type": "monthly", "start_date": first_day.isoformat(),
                   "price": price}
        payload.update(extra)
        assert client.post("/api/student-plans", headers=personal_headers, json=payload).status_code == 201

    plan(paid_id, 300)
    plan(owing_id, 250)
    plan(lapsed_id, 180, status="inactive")
    previous_month = first_day - timedelta(days=40)
    plan(lapsed_id, 90, start_date=previous_month.isoformat(), end_date=(first_day - timedelta(days=1)).isoformat())

    client.post("/api/financial-records", headers=personal_headers, json={
        "type": "income", "category": "Monthly fee", "amount": 300,
        "date": first_day.isoformat(), "student_id": paid_id,
    })

    summary = client.get("/api/dashboard/stats", headers=personal_headers).get_json()["financial_summary"]
    assert summary["income"] == 300
    assert summary["pending_payments"] == 250


def test_dashboard_average_rating(client, personal_headers):
    pid = profile_id(client, personal_headers)
    student_headers, _ = create_linked_student(client, personal_headers)
    client.post(f"/api/personals/{pid}/reviews", headers=student_headers, json={"rating": 4})

    stats = client.get("/api/dashboard/stats", headers=personal_headers).get_json()
    assert stats["average_rating"] == 4.0
    assert stats["total_students"] == 1


def test_dashboard_uses_the_utc_date(client, personal_headers, monkeypatch):
    monkeypatch.setattr("bricks.services.dashboard.utc_today", lambda: date(2030, 1, 12))
    stats = client.get("/api/dashboard/stats", headers=personal_headers).get_json()
    assert stats["weekly_productivity"][-1]["date"] == "2030-01-12"


def test_today_appointments(client, personal_headers):
    student_headers, _ = create_linked_student(client, personal_headers)
    pid = profile_id(client, personal_headers)
    later = datetime.combine(utc_today(), datetime.min.time()) + timedelta(hours=23)
    client.post("/api/appointments", headers=student_headers, json={
        "personal_id": pid,
        "start_time": later.isoformat(),
        "end_time": (later + timedelta(minutes=30)).isoformat(),
    })
    stats = client.get("/api/dashboard/stats", headers=personal_headers).get_json()
    assert stats["today_appointments"] == 1


def test_dashboard_is_for_personals(client, student_headers):
    assert client.get("/api/dashboard/stats", headers=student_headers).status_code == 403
