from __future__ import annotations

from src.hr_portal.hr_portal.core.enums import Table
from src.hr_portal.hr_portal.payroll.service import PayrollService
from src.hr_portal.hr_portal.payroll.store_repository import StorePayslipRepository


def _service(store, fixed_today):
    return PayrollService(StorePayslipRepository(store), today=lambda: fixed_today)


def test_process_writes_one_payslip_per_employee(store, container, fixed_today):
    store.seed_employee("EMP001", "Rajesh Kumar", base_salary=50000)
    store.seed_employee("EMP002", "Priya Sharma", base_salary=60000)

    run = _service(store, fixed_today).process(container.employees_repo.list_all())

    assert run.complete
    assert run.month == "October 2026"
    rows = store.rows(Table.PAYSLIPS)
    assert [(r["emp_id"], r["net_pay"], r["status"]) for r in rows] == [
        ("EMP001", 50000, "processed"),
        ("EMP002", 59000, "processed"),
    ]


def test_failed_insert_does_not_stop_the_batch(store, container, fixed_today):
    for emp_id in ("EMP001", "EMP002", "EMP003"):
        store.seed_employee(emp_id, emp_id, base_salary=30000)
    store.fail_on[("insert", Table.PAYSLIPS)] = lambda row: "insert refused" if row["emp_id"] == "EMP002" else None

    run = _service(store, fixed_today).process(container.employees_repo.list_all())

    assert not run.complete
    assert run.failed == {"EMP002": "insert refused"}
    assert [p.emp_id for p in run.processed] == ["EMP001", "EMP003"]
    assert sorted(r["emp_id"] for r in store.rows(Table.PAYSLIPS)) == ["EMP001", "EMP003"]


def test_running_twice_duplicates_payslips(store, container, fixed_today):
    store.seed_employee("EMP001", "Rajesh Kumar")
    svc = _service(store, fixed_today)
    employees = container.employees_repo.list_all()

    svc.process(employees)
    svc.process(employees)

    assert len(store.rows(Table.PAYSLIPS, emp_id="EMP001")) == 2


def test_preview_writes_nothing(store, container, fixed_today):
    store.seed_employee("EMP001", "Rajesh Kumar", base_salary=50000)

    lines = _service(store, fixed_today).preview(container.employees_repo.list_all())

    assert [line.net_pay for line in lines] == [50000]
    assert store.rows(Table.PAYSLIPS) == []
