from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.core.enums import Table
from src.hr_portal.hr_portal.core.exceptions import NotFoundError, PartialFailureError, StoreError, ValidationError
from src.hr_portal.hr_portal.employees.service import DirectoryService, EmployeeUpdate, NewEmployee
from src.hr_portal.hr_portal.employees.store_repository import StoreEmployeeRepository
from src.hr_portal.hr_portal.performance.store_repository import StorePerformanceRepository


@pytest.fixture
def directory(store, fixed_today):
    return DirectoryService(
        StoreEmployeeRepository(store),
        StorePerformanceRepository(store),
        today=lambda: fixed_today,
    )


def _new(emp_id="EMP010", **overrides):
    data = dict(
        id=emp_id,
        name="Neha Singh",
        email="neha@company.com",
        phone="9000000000",
        position="QA Engineer",
        join_date="2026-10-01",
        department="QA",
        base_salary=40000,
    )
    data.update(overrides)
    return NewEmployee(**data)


def test_add_employee_applies_defaults_and_creates_performance(store, directory):
    employee = directory.add_employee(_new())

    assert employee.manager == "John Doe"
    assert employee.status == "active"
    assert employee.leave_balance == 8

    perf = store.rows(Table.PERFORMANCE, emp_id="EMP010")
    assert len(perf) == 1
    assert perf[0]["rating"] == "3.5/5"
    assert perf[0]["tasks_completed"] == 0
    assert perf[0]["attendance_percent"] == 100
    assert perf[0]["last_review"] == "2026-10-19"


def test_blank_department_falls_back_to_default(store, directory):
    employee = directory.add_employee(_new(department="  "))
    assert employee.department == "IT"


@pytest.mark.parametrize("field", ["id", "name", "email", "phone", "position", "join_date"])
def test_add_employee_requires_every_field(store, directory, field):
    with pytest.raises(ValidationError, match="Please fill all fields"):
        directory.add_employee(_new(**{field: ""}))
    assert store.rows(Table.EMPLOYEES) == []


def test_duplicate_id_surfaces_store_error(store, directory):
    store.seed_employee("EMP010", "Someone Else")

    with pytest.raises(StoreError):
        directory.add_employee(_new())
    assert store.rows(Table.PERFORMANCE) == []


def test_performance_failure_keeps_the_employee(store, directory):
    store.fail_on[("insert", Table.PERFORMANCE)] = "performance table unavailable"

    with pytest.raises(PartialFailureError) as exc:
        directory.add_employee(_new())

    assert "EMP010" in str(exc.value)
    assert len(store.rows(Table.EMPLOYEES, id="EMP010")) == 1
    assert store.rows(Table.PERFORMANCE) == []


def test_edit_overwrites_fields_but_not_id(store, directory):
    store.seed_employee("EMP001", "Rajesh Kumar", base_salary=50000)

    updated = directory.edit_employee(
        EmployeeUpdate(
            id="EMP001",
            name="Rajesh K.",
            email="rk@company.com",
            phone="9111111111",
            department="Platform",
            position="Lead",
            base_salary=60000,
            join_date="2023-01-15",
            leave_balance=5,
        )
    )

    assert updated.id == "EMP001"
    assert (updated.name, updated.base_salary, updated.leave_balance) == ("Rajesh K.", 60000, 5)
    assert store.rows(Table.EMPLOYEES)[0]["department"] == "Platform"


def test_edit_requires_core_fields(store, directory):
    store.seed_employee("EMP001", "Rajesh Kumar")
    with pytest.raises(ValidationError, match="Please fill all required fields"):
        directory.edit_employee(
            EmployeeUpdate(
                id="EMP001",
                name="",
                email="rk@company.com",
                phone="9111111111",
                department="IT",
                position="Lead",
                base_salary=1,
                join_date="",
            )
        )


def test_edit_unknown_employee_is_not_found(directory):
    with pytest.raises(NotFoundError):
        directory.edit_employee(
            EmployeeUpdate(
                id="EMP404",
                name="Ghost",
                email="g@company.com",
                phone="1",
                department="IT",
                position="None",
                base_salary=0,
                join_date="",
            )
        )


def test_delete_does_not_cascade(store, directory):
    store.seed_employee("EMP003", "Amit Patel")
    store.seed(Table.TASKS, assigned_to="EMP003", assigned_by="John Doe", title="t", due_date="2026-11-01", status="pending")
    store.seed(Table.PAYSLIPS, emp_id="EMP003", month="September 2026", salary=1, bonus=0, deductions=0, net_pay=1, status="processed")
    store.seed(Table.PERFORMANCE, emp_id="EMP003", rating="4.2/5", tasks_completed=1, attendance_percent=90, last_review="2026-09-01")

    directory.delete_employee("EMP003")

    assert store.rows(Table.EMPLOYEES) == []
    assert len(store.rows(Table.TASKS, assigned_to="EMP003")) == 1
    assert len(store.rows(Table.PAYSLIPS, emp_id="EMP003")) == 1
    assert len(store.rows(Table.PERFORMANCE, emp_id="EMP003")) == 1


def test_delete_unknown_employee_is_not_found(directory):
    with pytest.raises(NotFoundError):
        directory.delete_employee("EMP404")


def test_directory_lists_by_id(store, directory):
    store.seed_employee("EMP003", "Amit Patel")
    store.seed_employee("EMP001", "Rajesh Kumar")

    assert [e.id for e in directory.list_directory()] == ["EMP001", "EMP003"]
