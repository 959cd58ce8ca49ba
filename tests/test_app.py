from __future__ import annotations

import pytest

import config.testing as testing_settings
from src.hr_portal.hr_portal.core.enums import Table
from src.hr_portal.hr_portal.core.exceptions import ConfigurationError
from src.hr_portal.hr_portal.main import create_app


@pytest.fixture
def app(monkeypatch, store, container):
    monkeypatch.setenv("APP_ENV", "testing")
    store.seed_employee("EMP001", "Rajesh Kumar", base_salary=50000)
    store.seed_employee("EMP002", "Priya Sharma", base_salary=60000)
    store.seed(Table.TASKS, assigned_to="EMP001", assigned_by="John Doe", title="Code review", due_date="2026-11-10", status="pending")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, username, role="employee", password="pw"):
    return client.post("/login", json={"username": username, "password": password, "role": role})


def test_missing_store_settings_fail_at_startup(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(testing_settings, "RECORD_STORE_URL", None)
    monkeypatch.setattr(testing_settings, "RECORD_STORE_KEY", "key")

    with pytest.raises(ConfigurationError, match="RECORD_STORE_URL"):
        create_app()


def test_employee_login_and_dashboard(client):
    res = _login(client, "emp001")
    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["identity"]["emp_id"] == "EMP001"
    assert body["message"] == "Welcome, Rajesh Kumar"

    dash = client.get("/employee/dashboard").get_json()
    assert dash["profile"]["name"] == "Rajesh Kumar"
    assert dash["dashboard"]["pending_tasks"] == 1


def test_unknown_employee_login_fails(client):
    res = _login(client, "EMP999")
    assert res.status_code == 404
    assert res.get_json() == {"success": False, "message": "Invalid employee ID"}


def test_blank_credentials_fail(client):
    res = _login(client, "emp001", password="")
    assert res.status_code == 400
    assert res.get_json()["message"] == "Please enter credentials"


def test_portals_are_guarded_by_role(client):
    assert client.get("/employee/dashboard").status_code == 401

    _login(client, "emp001")
    assert client.get("/manager/dashboard").status_code == 403


def test_employee_toggles_task(client):
    _login(client, "emp001")
    task = client.get("/employee/tasks").get_json()["tasks"][0]

    res = client.post(f"/employee/tasks/{task['id']}/toggle", json={"status": task["status"]})

    assert res.get_json()["message"] == "Task marked as completed"
    assert client.get("/employee/tasks").get_json()["pending_tasks"] == 0


def test_manager_adds_employee_and_duplicate_is_reported(client, store):
    _login(client, "boss", role="manager")
    payload = {
        "id": "EMP010",
        "name": "Neha Singh",
        "email": "neha@company.com",
        "phone": "9000000000",
        "position": "QA Engineer",
        "join_date": "2026-10-01",
        "base_salary": "40000",
    }

    res = client.post("/manager/employees", json=payload)
    assert res.status_code == 201
    assert res.get_json()["employee"]["department"] == "IT"
    assert len(store.rows(Table.PERFORMANCE, emp_id="EMP010")) == 1

    dup = client.post("/manager/employees", json=payload)
    assert dup.status_code == 502
    assert dup.get_json()["message"].startswith("Error adding employee:")


def test_manager_delete_needs_confirmation(client, store):
    _login(client, "boss", role="manager")

    assert client.delete("/manager/employees/EMP002").status_code == 400
    assert client.delete("/manager/employees/EMP002?confirm=1").status_code == 200
    assert [r["id"] for r in store.rows(Table.EMPLOYEES)] == ["EMP001"]


def test_payroll_partial_failure_is_reported(client, store):
    _login(client, "boss", role="manager")
    store.fail_on[("insert", Table.PAYSLIPS)] = lambda row: "insert refused" if row["emp_id"] == "EMP002" else None

    body = client.post("/manager/payroll").get_json()

    assert body["success"] is False
    assert body["message"] == "Payroll processed for 1 employees, 1 failed"
    assert body["run"]["failed"] == {"EMP002": "insert refused"}


def test_logout_closes_the_live_view(client, container):
    _login(client, "emp001")
    _login(client, "emp002")
    assert len(container.sessions) == 1
    assert container.store.changes.subscriber_count == 3

    client.post("/logout")

    assert len(container.sessions) == 0
    assert container.store.changes.subscriber_count == 0
    assert client.get("/me").status_code == 401


def test_logins_without_cookies_keep_one_view_per_identity(app, container):
    for _ in range(50):
        _login(app.test_client(), "emp001")
    _login(app.test_client(), "boss", role="manager")

    assert len(container.sessions) == 2
    assert container.store.changes.subscriber_count == 3


def test_failed_view_open_on_login_leaves_nothing_behind(client, store, container):
    store.seed(Table.TASKS, assigned_to="EMP001", assigned_by="import", title="odd", due_date="2026-11-03", status="archived")

    res = _login(client, "emp001")

    assert res.status_code == 500
    assert res.get_json()["message"] == "System error while logging in"
    assert len(container.sessions) == 0
    assert container.store.changes.subscriber_count == 0
    assert client.get("/me").status_code == 401


def test_numeric_username_is_rejected_cleanly(client):
    res = client.post("/login", json={"username": 101, "password": 1234, "role": "employee"})

    assert res.status_code == 404
    assert res.get_json()["message"] == "Invalid employee ID"
