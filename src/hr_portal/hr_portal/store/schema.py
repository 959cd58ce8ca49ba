"""Column lists for the record store tables.

Identifiers are interpolated into SQL by the MySQL backend, so every table and
column name passes through `check_columns` first.
"""

from __future__ import annotations

from typing import Iterable

from ..core.enums import Table

PRIMARY_KEY = "id"

TABLE_COLUMNS: dict[Table, tuple[str, ...]] = {
    Table.EMPLOYEES: (
        "id",
        "name",
        "email",
        "phone",
        "department",
        "position",
        "manager",
        "base_salary",
        "join_date",
        "status",
        "leave_balance",
        "created_at",
    ),
    Table.TASKS: ("id", "assigned_to", "assigned_by", "title", "due_date", "status", "created_at"),
    Table.ATTENDANCE: ("id", "emp_id", "date", "status", "check_in", "check_out", "created_at"),
    Table.PAYSLIPS: (
        "id",
        "emp_id",
        "month",
        "salary",
        "bonus",
        "deductions",
        "net_pay",
        "status",
        "created_at",
    ),
    Table.PERFORMANCE: (
        "id",
        "emp_id",
        "rating",
        "tasks_completed",
        "attendance_percent",
        "last_review",
        "created_at",
        "updated_at",
    ),
}

# Tables whose primary key is assigned by the caller rather than the store.
CALLER_KEYED = {Table.EMPLOYEES}


def columns_of(table: Table) -> tuple[str, ...]:
    return TABLE_COLUMNS[Table(table)]


def check_columns(table: Table, names: Iterable[str]) -> list[str]:
    known = set(columns_of(table))
    out = list(names)
    unknown = [n for n in out if n not in known]
    if unknown:
        raise ValueError(f"Unknown column(s) for {Table(table).value}: {', '.join(unknown)}")
    return out
