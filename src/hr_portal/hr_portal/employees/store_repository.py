from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.enums import Table
from ..store.base import RecordStore
from .model import Employee
from .repository import EmployeeRepository


class StoreEmployeeRepository(EmployeeRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, emp_id: str) -> Optional[Employee]:
        row = self._store.select_one(Table.EMPLOYEES, eq={"id": emp_id})
        return Employee.from_row(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        rows = self._store.select(Table.EMPLOYEES, order_by="id", ascending=True)
        return [Employee.from_row(r) for r in rows]

    def create(self, employee: Employee) -> Employee:
        return Employee.from_row(self._store.insert(Table.EMPLOYEES, employee.to_row()))

    def update(self, emp_id: str, values: Mapping[str, Any]) -> Optional[Employee]:
        rows = self._store.update(Table.EMPLOYEES, values, eq={"id": emp_id})
        return Employee.from_row(rows[0]) if rows else None

    def delete_by_id(self, emp_id: str) -> bool:
        return bool(self._store.delete(Table.EMPLOYEES, eq={"id": emp_id}))
