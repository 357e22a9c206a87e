from __future__ import annotations


def _add_student(client, **body):
    resp = client.post("/api/students", json={"name": "Asha", "monthly_fee": "1500", **body})
    assert resp.status_code == 201
    return resp.get_json()


def test_current_coach_is_seeded(client):
    resp = client.get("/api/coach")

    assert resp.status_code == 200
    assert resp.get_json()["id"] == 1


def test_student_lifecycle(client, app):
    state = app.extensions["coach_desk"].state
    created = _add_student(client)
    assert created["monthly_fee"] == 1500.0
    assert created["status"] == "active"
    assert state.success_message == "Student added successfully!"

    sid = created["id"]
    resp = client.put(f"/api/students/{sid}", json={"name": "Asha K", "monthly_fee": 1800, "status": "inactive"})
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "Asha K"
    assert state.find_student(sid).monthly_fee == 1800.0

    assert client.get("/api/students?status=inactive").get_json()[0]["id"] == sid
    assert client.get("/api/students?status=active").get_json() == []

    assert client.delete(f"/api/students/{sid}").status_code == 200
    assert client.get("/api/students").get_json() == []
    assert client.delete(f"/api/students/{sid}").status_code == 404


def test_invalid_input_maps_to_400(client):
    resp = client.post("/api/students", json={"name": "  "})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_duplicate_coach_email_maps_to_409(client):
    resp = client.post("/api/coaches", json={"name": "Other", "email": "coach@example.com"})

    assert resp.status_code == 409


def test_attendance_sheet_round(client):
    a = _add_student(client, name="Amy")["id"]
    z = _add_student(client, name="Zed")["id"]

    resp = client.post("/api/attendance", json={"date": "2024-03-01", "marks": {str(a): "present", str(z): "absent"}})
    assert resp.get_json() == {"date": "2024-03-01", "saved": 2}

    client.post(f"/api/students/{z}/attendance", json={"date": "2024-03-01", "status": "present"})

    sheet = client.get("/api/attendance?date=2024-03-01").get_json()
    assert sheet["marks"] == {str(a): "present", str(z): "present"}
    assert sheet["present"] == 2
    assert client.get(f"/api/students/{z}/attendance/summary?month=2024-03").get_json() == {
        "present": 1,
        "absent": 0,
    }


def test_empty_attendance_save_is_rejected(client):
    assert client.post("/api/attendance", json={"date": "2024-03-01", "marks": {}}).status_code == 400


def test_payments_flow(client):
    sid = _add_student(client)["id"]
    client.post("/api/payments", json={"student_id": sid, "amount": 1000, "month": "2024-03"})
    pending = client.post(
        "/api/payments", json={"student_id": sid, "amount": 1000, "month": "2024-03", "status": "pending"}
    ).get_json()

    assert client.get("/api/payments/summary?month=2024-03").get_json()["total"] == 1000.0
    assert [p["id"] for p in client.get("/api/payments/pending").get_json()] == [pending["id"]]

    resp = client.patch(f"/api/payments/{pending['id']}/status", json={"status": "completed"})
    assert resp.get_json()["status"] == "completed"
    assert client.get("/api/payments/summary?month=2024-03").get_json() == {
        "month": "2024-03",
        "total": 2000.0,
        "count": 2,
        "average": 1000.0,
    }
    assert client.get("/api/payments/9999").status_code == 404


def test_payment_method_key_is_masked(client):
    resp = client.post(
        "/api/payment-methods", json={"method_type": "card", "provider": "stripe", "api_key": "sk_live_12345678"}
    )
    mid = resp.get_json()["id"]

    listed = client.get("/api/payment-methods").get_json()
    assert listed[0]["api_key"] == "************5678"

    assert client.delete(f"/api/payment-methods/{mid}").status_code == 200
    assert client.get("/api/payment-methods").get_json() == []


def test_dashboard_route(client):
    sid = _add_student(client)["id"]
    client.post("/api/students/%d/attendance" % sid, json={"date": "2024-03-15"})

    stats = client.get("/api/dashboard?date=2024-03-15").get_json()

    assert stats["total_students"] == 1
    assert stats["attendance_today"] == 1
    assert stats["expected_monthly_revenue"] == 1500.0


def test_attendance_marks_must_be_an_object(client):
    resp = client.post("/api/attendance", json={"date": "2024-03-01", "marks": ["1"]})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_payment_method_flag_must_be_boolean(client):
    resp = client.post(
        "/api/payment-methods",
        json={"method_type": "card", "provider": "stripe", "api_key": "sk_live_1", "is_active": "false"},
    )
    assert resp.status_code == 400

    resp = client.post(
        "/api/payment-methods",
        json={"method_type": "card", "provider": "stripe", "api_key": "sk_live_1", "is_active": 0},
    )
    assert resp.status_code == 201
    assert client.get("/api/payment-methods").get_json() == []
