from __future__ import annotations

from datetime import date
from typing import Any, Callable, Mapping, Optional, Union

import pytest

from src.hr_portal.hr_portal.container import build_container_for_store
from src.hr_portal.hr_portal.core.enums import ChangeKind, Table
from src.hr_portal.hr_portal.core.exceptions import StoreError
from src.hr_portal.hr_portal.store.feed import ChangeFeed

FailRule = Union[str, Callable[[Mapping[str, Any]], Optional[str]]]


class InMemoryRecordStore:
    """RecordStore fake: dict rows per table, store-assigned ids, same change events as the real backends."""

    def __init__(self):
        self.tables: dict[Table, list[dict]] = {t: [] for t in Table}
        self.changes = ChangeFeed()
        self.calls: list[tuple[str, Table]] = []
        self.fail_on: dict[tuple[str, Table], FailRule] = {}
        self._next_id = {t: 1 for t in Table}
        self._clock = 0

    def _check(self, action: str, table: Table, payload: Mapping[str, Any]) -> None:
        self.calls.append((action, table))
        rule = self.fail_on.get((action, table))
        if rule is None:
            return
        message = rule(payload) if callable(rule) else rule
        if message:
            raise StoreError(message)

    @staticmethod
    def _matches(row: Mapping[str, Any], eq: Optional[Mapping[str, Any]]) -> bool:
        return all(str(row.get(k)) == str(v) for k, v in (eq or {}).items())

    def _stamp(self) -> str:
        self._clock += 1
        return f"2026-01-01T00:00:00.{self._clock:06d}"

    def select(self, table, *, eq=None, order_by=None, ascending=True, limit=None):
        table = Table(table)
        self._check("select", table, eq or {})
        rows = [dict(r) for r in self.tables[table] if self._matches(r, eq)]
        if order_by:
            rows.sort(key=lambda r: (r.get(order_by), r["id"]), reverse=not ascending)
        if limit is not None:
            rows = rows[: int(limit)]
        return rows

    def select_one(self, table, *, eq):
        rows = self.select(table, eq=eq, limit=1)
        return rows[0] if rows else None

    def insert(self, table, row):
        table = Table(table)
        self._check("insert", table, row)
        stored = dict(row)
        if table == Table.EMPLOYEES:
            if any(r["id"] == stored["id"] for r in self.tables[table]):
                raise StoreError('duplicate key value violates unique constraint "employees_pkey"')
        else:
            stored["id"] = self._next_id[table]
            self._next_id[table] += 1
        stored.setdefault("created_at", self._stamp())
        self.tables[table].append(stored)
        self.changes.publish_rows(table, ChangeKind.INSERT, [stored])
        return dict(stored)

    def update(self, table, values, *, eq):
        table = Table(table)
        self._check("update", table, {**eq, **values})
        out = []
        for r in self.tables[table]:
            if self._matches(r, eq):
                r.update(values)
                out.append(dict(r))
        self.changes.publish_rows(table, ChangeKind.UPDATE, out)
        return out

    def delete(self, table, *, eq):
        table = Table(table)
        self._check("delete", table, eq)
        removed = [dict(r) for r in self.tables[table] if self._matches(r, eq)]
        self.tables[table] = [r for r in self.tables[table] if not self._matches(r, eq)]
        self.changes.publish_rows(table, ChangeKind.DELETE, removed)
        return removed

    # test helpers (bypass the change feed)

    def seed(self, table: Table, **row) -> dict:
        table = Table(table)
        if table != Table.EMPLOYEES and "id" not in row:
            row["id"] = self._next_id[table]
            self._next_id[table] += 1
        row.setdefault("created_at", self._stamp())
        self.tables[table].append(row)
        return row

    def seed_employee(self, emp_id: str, name: str, *, base_salary=50000, **extra) -> dict:
        row = {
            "id": emp_id,
            "name": name,
            "email": f"{emp_id.lower()}@company.com",
            "phone": "9876543210",
            "department": "IT",
            "position": "Engineer",
            "manager": "John Doe",
            "base_salary": base_salary,
            "join_date": "2023-01-15",
            "status": "active",
            "leave_balance": 8,
        }
        row.update(extra)
        return self.seed(Table.EMPLOYEES, **row)

    def rows(self, table: Table, **eq) -> list[dict]:
        return [dict(r) for r in self.tables[Table(table)] if self._matches(r, eq)]


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def container(store):
    return build_container_for_store(store)


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 10, 19)
