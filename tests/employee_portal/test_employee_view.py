from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.core.enums import Table, TaskStatus
from src.hr_portal.hr_portal.core.exceptions import NotFoundError, StoreError, ValidationError
from src.hr_portal.hr_portal.identity.model import Identity


@pytest.fixture
def seeded(store):
    store.seed_employee("EMP001", "Rajesh Kumar", base_salary=50000, leave_balance=6)
    store.seed_employee("EMP002", "Priya Sharma")
    store.seed(Table.TASKS, assigned_to="EMP001", assigned_by="John Doe", title="Code review", due_date="2026-11-10", status="pending")
    store.seed(Table.TASKS, assigned_to="EMP001", assigned_by="John Doe", title="Docs", due_date="2026-11-02", status="completed")
    store.seed(Table.PERFORMANCE, emp_id="EMP001", rating="4.2/5", tasks_completed=12, attendance_percent=95, last_review="2026-09-30")
    for day in range(1, 13):
        status = "absent" if day == 12 else "present"
        store.seed(Table.ATTENDANCE, emp_id="EMP001", date=f"2026-10-{day:02d}", status=status, check_in="09:00", check_out="18:00")
    return store


@pytest.fixture
def view(seeded, container):
    identity = container.identity_gate.resolve("emp001", "pw", "employee")
    v = container.employee_view(identity)
    yield v
    v.close()


def _selects(store, table):
    return sum(1 for action, t in store.calls if action == "select" and t == table)


def test_open_loads_every_collection(view):
    assert view.open() == []

    assert view.profile.name == "Rajesh Kumar"
    assert [t.title for t in view.tasks] == ["Docs", "Code review"]
    assert view.performance.rating == "4.2/5"
    assert view.payslips == []
    assert view.dashboard() == {"pending_tasks": 1, "present_days": 9, "leave_balance": 6, "rating": "4.2/5"}


def test_attendance_shows_most_recent_window(view):
    view.open()

    dates = [a.date for a in view.attendance]
    assert len(dates) == 10
    assert dates[0] == "2026-10-12"
    assert dates == sorted(dates, reverse=True)


def test_one_failed_load_does_not_block_the_others(seeded, view):
    seeded.fail_on[("select", Table.PAYSLIPS)] = "timeout"

    assert view.open() == ["payslips"]
    assert view.profile is not None
    assert len(view.tasks) == 2


def test_missing_profile_is_not_an_error(store, container):
    store.seed_employee("EMP009", "Temp")
    identity = container.identity_gate.resolve("emp009", "pw", "employee")
    store.tables[Table.EMPLOYEES].clear()

    v = container.employee_view(identity)
    assert v.open() == []
    assert v.profile is None
    assert v.dashboard()["leave_balance"] == 0
    v.close()


def test_view_requires_employee_identity(container):
    with pytest.raises(ValidationError):
        container.employee_view(Identity.manager("boss"))


def test_new_task_for_this_employee_reloads_tasks(view, container):
    view.open()

    container.task_service.assign(assigned_to="EMP001", title="Fresh", due_date="2026-10-25")

    assert "Fresh" in [t.title for t in view.tasks]
    assert view.pending_task_count == 2


def test_change_for_another_employee_does_not_reload(seeded, view, container):
    view.open()
    before = _selects(seeded, Table.TASKS)

    container.task_service.assign(assigned_to="EMP002", title="Not yours", due_date="2026-10-25")

    assert _selects(seeded, Table.TASKS) == before
    assert "Not yours" not in [t.title for t in view.tasks]


def test_payroll_run_reloads_payslips(view, container):
    view.open()

    container.payroll_service.process(container.employees_repo.list_all())

    assert [p.emp_id for p in view.payslips] == ["EMP001"]
    assert view.payslips[0].net_pay == 50000


def test_close_stops_reloads(seeded, view, container):
    view.open()
    assert view.is_live
    view.close()
    before = _selects(seeded, Table.TASKS)

    container.task_service.assign(assigned_to="EMP001", title="After close", due_date="2026-10-25")

    assert not view.is_live
    assert _selects(seeded, Table.TASKS) == before
    assert seeded.changes.subscriber_count == 0


def test_failed_reload_after_change_keeps_previous_tasks(seeded, view, container):
    view.open()
    seeded.fail_on[("select", Table.TASKS)] = "connection reset"

    container.task_service.assign(assigned_to="EMP001", title="Invisible", due_date="2026-10-25")

    assert [t.title for t in view.tasks] == ["Docs", "Code review"]


def test_toggle_task_flips_and_reloads(view):
    view.open()
    task = next(t for t in view.tasks if t.title == "Code review")

    message = view.toggle_task(task.id, task.status)

    assert message == "Task marked as completed"
    assert next(t for t in view.tasks if t.id == task.id).status == TaskStatus.COMPLETED
    assert view.pending_task_count == 0


def test_toggle_failure_leaves_tasks_unchanged(seeded, view):
    view.open()
    seeded.fail_on[("update", Table.TASKS)] = "write refused"
    task = view.tasks[0]

    with pytest.raises(StoreError):
        view.toggle_task(task.id, task.status)
    assert view.tasks[0].status == task.status


def test_payslip_download_is_acknowledged(seeded, view):
    seeded.seed(Table.PAYSLIPS, emp_id="EMP001", month="September 2026", salary=50000, bonus=5000, deductions=5000, net_pay=50000, status="processed")
    view.open()

    assert view.request_payslip_download(view.payslips[0].id) == "Downloading payslip for September 2026"


def test_cannot_download_someone_elses_payslip(seeded, view):
    other = seeded.seed(Table.PAYSLIPS, emp_id="EMP002", month="September 2026", salary=1, bonus=0, deductions=0, net_pay=1, status="processed")
    view.open()

    with pytest.raises(NotFoundError):
        view.request_payslip_download(other["id"])


def test_deleted_rows_clear_profile_and_performance(seeded, view, container):
    view.open()
    container.directory_service.delete_employee("EMP001")
    seeded.delete(Table.PERFORMANCE, eq={"emp_id": "EMP001"})

    assert view.load_profile() is None
    assert view.performance is None
    assert view.dashboard()["rating"] is None


def test_unexpected_load_error_closes_the_view(seeded, view):
    seeded.seed(Table.TASKS, assigned_to="EMP001", assigned_by="import", title="odd", due_date="2026-11-03", status="archived")

    with pytest.raises(ValueError):
        view.open()

    assert not view.is_live
    assert seeded.changes.subscriber_count == 0
