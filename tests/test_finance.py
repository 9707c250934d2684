from datetime import date

from bricks.utils.dates import utc_today

from tests.conftest import create_linked_student, register


def _record(client, headers, **fields):
    payload = {"type": "income", "category": "Monthly fee", "amount": 300, "date": utc_today().isoformat()}
    payload.update(fields)
    return client.post("/api/financial-records", headers=headers, json=payload)


def test_create_and_list_records(client, personal_headers):
    _, student_id = create_linked_student(client, personal_headers)
    resp = _record(client, personal_headers, student_id=student_id, description="January")
    assert resp.status_code == 201
    record = resp.get_json()["record"]
    assert record["student_name"] == "Linked Student"
    assert record["amount"] == 300

    _record(client, personal_headers, type="expense", category="Equipment", amount=120.5)
    assert len(client.get("/api/financial-records", headers=personal_headers).get_json()) == 2

    expenses = client.get("/api/financial-records?type=expense", headers=personal_headers).get_json()
    assert [r["category"] for r in expenses] == ["Equipment"]
    by_category = client.get("/api/financial-records?category=Monthly%20fee", headers=personal_headers).get_json()
    assert len(by_category) == 1
    old = client.get("/api/financial-records?end_date=2000-01-01", headers=personal_headers).get_json()
    assert old == []


def test_amount_must_be_positive(client, personal_headers):
    resp = _record(client, personal_headers, amount=0)
    assert resp.status_code == 400
    assert resp.get_json()["msg"] == "Amount must be greater than zero"
    assert _record(client, personal_headers, type="refund").status_code == 400


def test_record_for_foreign_student(client, personal_headers):
    other = register(client, "personal", "other@example.com")
    _, foreign_id = create_linked_student(client, other)
    assert _record(client, personal_headers, student_id=foreign_id).status_code == 404


def test_summary_defaults_to_current_month(client, personal_headers):
    _record(client, personal_headers, amount=500)
    _record(client, personal_headers, type="expense", category="Rent", amount=200)
    _record(client, personal_headers, amount=999, date="2001-05-10")

    summary = client.get("/api/financial-records/summary", headers=personal_headers).get_json()
    assert summary["income"] == 500
    assert summary["expenses"] == 200
    assert summary["balance"] == 300
    assert summary["start_date"] == utc_today().replace(day=1).isoformat()

    old = client.get(
        "/api/financial-records/summary?start_date=2001-05-01&end_date=2001-05-31", headers=personal_headers
    ).get_json()
    assert old["income"] == 999
    assert old["balance"] == 999


def test_summary_period_follows_the_utc_month(client, personal_headers, monkeypatch):
    monkeypatch.setattr("bricks.routes.finance.utc_today", lambda: date(2030, 2, 10))
    _record(client, personal_headers, amount=120, date="2030-02-28")
    _record(client, personal_headers, amount=80, date="2030-03-01")

    summary = client.get("/api/financial-records/summary", headers=personal_headers).get_json()
    assert summary["start_date"] == "2030-02-01"
    assert summary["end_date"] == "2030-02-28"
    assert summary["income"] == 120


def test_update_and_delete_record(client, personal_headers):
    record_id = _record(client, personal_headers).get_json()["record"]["id"]
    updated = client.patch(f"/api/financial-records/{record_id}", headers=personal_headers, json={"amount": 350})
    assert updated.get_json()["record"]["amount"] == 350

    other = register(client, "personal", "other@example.com")
    assert client.get(f"/api/financial-records/{record_id}", headers=other).status_code == 403

    assert client.delete(f"/api/financial-records/{record_id}", headers=personal_headers).status_code == 200
    assert client.get(f"/api/financial-records/{record_id}", headers=personal_headers).status_code == 404


def test_export_formats(client, personal_headers):
    _record(client, personal_headers, description="Session pack")

    csv_resp = client.post("/api/financial-records/export", headers=personal_headers, json={"format": "csv"})
    assert csv_resp.status_code == 200
    assert csv_resp.mimetype == "text/csv"
    text = csv_resp.get_data(as_text=True)
    assert "Financial Report" in text
    assert "Session pack" in text

    pdf = client.post("/api/financial-records/export", headers=personal_headers, json={})
    assert pdf.mimetype == "application/pdf"
    assert pdf.data.startswith(b"%PDF")

    excel = client.post("/api/financial-records/export", headers=personal_headers, json={"format": "excel"})
    assert excel.status_code == 200
    assert excel.data[:2] == b"PK"

    bad = client.post("/api/financial-records/export", headers=personal_headers, json={"format": "doc"})
    assert bad.status_code == 400


def test_student_plans(client, personal_headers):
    _, student_id = create_linked_student(client, personal_headers)
    resp = client.post("/api/student-plans", headers=personal_headers, json={
        "student_id": student_id, "plan_type": "quarterly", "start_date": "2030-01-01",
        "end_date": "2030-03-31", "price": 750,
    })
    assert resp.status_code == 201
    assert resp.get_json()["plan"]["status"] == "active"

    inverted = client.post("/api/student-plans", headers=personal_headers, json={
        "student_id": student_id, "plan_type": "monthly", "start_date": "2030-02-01", "end_date": "2030-01-01",
    })
    assert inverted.status_code == 400
    assert client.post("/api/student-plans", headers=personal_headers, json={
        "student_id": 999, "plan_type": "monthly", "start_date": "2030-02-01",
    }).status_code == 404

    plans = client.get(f"/api/student-plans?student_id={student_id}", headers=personal_headers).get_json()
    assert [p["plan_type"] for p in plans] == ["quarterly"]
