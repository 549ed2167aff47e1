from __future__ import annotations

import pytest

from src.hotel_hrm.hotel_hrm.database.seed import DEMO_PASSWORD


def _login(client, username, password=DEMO_PASSWORD):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def _new_employee(client, **overrides):
    payload = {
        "first_name": "Ann",
        "last_name": "Lee",
        "email": "ann.lee@hotelhrm.com",
        "phone_number": "+1-555-0199",
        "department": "Front Desk",
        "position": "Receptionist",
        "hire_date": "2023-01-15",
        "base_salary": "36000",
    }
    payload.update(overrides)
    return client.post("/api/employees", json=payload)


def test_login_then_me(client):
    resp = _login(client, "hr.admin")
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "HR"

    me = client.get("/api/auth/me").get_json()
    assert me["user"]["username"] == "hr.admin"
    assert me["can_modify_payroll_data"] is True


def test_me_requires_login(client):
    resp = client.get("/api/auth/me")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_wrong_password_is_rejected_without_session(client):
    resp = _login(client, "hr.admin", "wrong-password")

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid username or password"
    assert client.get("/api/auth/me").status_code == 401


def test_logout_clears_session(client):
    _login(client, "hr.admin")
    assert client.post("/api/auth/logout").status_code == 200

    assert client.get("/api/auth/me").status_code == 401


def test_hr_processes_payroll(client):
    _login(client, "hr.admin")
    created = _new_employee(client)
    assert created.status_code == 201
    employee_id = created.get_json()["employee"]["employee_id"]

    resp = client.post(
        "/api/payroll/process",
        json={
            "employee_id": employee_id,
            "period_start": "2024-01-01",
            "period_end": "2024-01-30",
            "bonus": "500",
            "deductions": "200",
        },
    )

    assert resp.status_code == 201
    record = resp.get_json()["record"]
    assert record["gross_pay"] == "3500"
    assert record["net_pay"] == "3300"
    assert record["status"] == "Processed"
    assert record["employee"]["full_name"] == "Ann Lee"

    history = client.get(f"/api/employees/{employee_id}/payroll").get_json()["records"]
    assert [r["payroll_id"] for r in history] == [record["payroll_id"]]


@pytest.mark.parametrize(
    "payload, status",
    [
        ({"employee_id": 999, "period_start": "2024-01-01", "period_end": "2024-01-31"}, 404),
        ({"employee_id": 1, "period_start": "2024-01-31", "period_end": "2024-01-01"}, 400),
        ({"employee_id": 1, "period_start": "2024-01-01", "period_end": "2024-01-31", "bonus": "-5"}, 400),
        ({"employee_id": "abc", "period_start": "2024-01-01", "period_end": "2024-01-31"}, 400),
        ({"employee_id": 1, "period_start": "January", "period_end": "2024-01-31"}, 400),
    ],
)
def test_process_payroll_rejects_bad_requests(client, payload, status):
    _login(client, "hr.admin")

    resp = client.post("/api/payroll/process", json=payload)

    assert resp.status_code == status
    assert client.get("/api/payroll").get_json()["records"] == []


def test_employee_role_is_read_only_and_scoped_to_self(client):
    _login(client, "hr.admin")
    client.post(
        "/api/payroll/process",
        json={"employee_id": 2, "period_start": "2024-01-01", "period_end": "2024-01-31"},
    )
    client.post("/api/auth/logout")

    _login(client, "john.doe")
    resp = client.post(
        "/api/payroll/process",
        json={"employee_id": 1, "period_start": "2024-01-01", "period_end": "2024-01-31"},
    )
    assert resp.status_code == 403
    assert _new_employee(client).status_code == 403

    employees = client.get("/api/employees").get_json()["employees"]
    assert [e["employee_id"] for e in employees] == [1]
    assert client.get("/api/employees/2").status_code == 403
    assert client.get("/api/employees/2/payroll").status_code == 403
    assert client.get("/api/payroll").get_json()["records"] == []


def test_user_admin_is_admin_only(client):
    _login(client, "hr.admin")
    assert client.get("/api/users").status_code == 403
    client.post("/api/auth/logout")

    _login(client, "admin")
    resp = client.get("/api/users")
    assert resp.status_code == 200
    users = resp.get_json()["users"]
    assert "password_hash" not in users[0]
    assert {u["username"] for u in users} >= {"admin", "hr.admin", "john.doe"}


def test_non_json_body_is_a_bad_request(client):
    resp = client.post("/api/auth/login", data="username=hr.admin")

    assert resp.status_code == 400


def test_null_text_fields_are_stored_empty(client):
    _login(client, "hr.admin")

    resp = client.put("/api/employees/1", json={"email": None, "position": "Head Receptionist"})

    assert resp.status_code == 200
    employee = resp.get_json()["employee"]
    assert employee["email"] == ""
    assert employee["position"] == "Head Receptionist"


def test_employee_role_edit_does_not_reveal_which_ids_exist(client):
    _login(client, "john.doe")

    assert client.put("/api/employees/2", json={"position": "Chef"}).status_code == 403
    assert client.put("/api/employees/999", json={"position": "Chef"}).status_code == 403


def test_oversized_amount_is_a_bad_request(client):
    _login(client, "hr.admin")

    resp = client.post(
        "/api/payroll/process",
        json={"employee_id": 1, "period_start": "2024-01-01", "period_end": "2024-01-31", "bonus": "1e999999999"},
    )

    assert resp.status_code == 400
    assert client.get("/api/payroll").get_json()["records"] == []
