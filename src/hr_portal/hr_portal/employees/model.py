from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_date, iso_timestamp
from ..common.numbers import Number, as_int, as_number
from ..core.constants import DEFAULT_DEPARTMENT, DEFAULT_LEAVE_BALANCE, DEFAULT_MANAGER_NAME
from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: one row of the employee directory.

    Note: plain data object, no store access here.
    """

    id: str
    name: str
    email: str
    phone: str
    department: str
    position: str
    manager: str
    base_salary: Number
    join_date: str
    status: str
    leave_balance: int
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Employee":
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            email=row.get("email") or "",
            phone=row.get("phone") or "",
            department=row.get("department") or DEFAULT_DEPARTMENT,
            position=row.get("position") or "",
            manager=row.get("manager") or DEFAULT_MANAGER_NAME,
            base_salary=as_number(row.get("base_salary")),
            join_date=iso_date(row.get("join_date")) or "",
            status=row.get("status") or EmployeeStatus.ACTIVE.value,
            leave_balance=as_int(row.get("leave_balance"), DEFAULT_LEAVE_BALANCE),
            created_at=iso_timestamp(row.get("created_at")),
        )

    def to_row(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department,
            "position": self.position,
            "manager": self.manager,
            "base_salary": self.base_salary,
            "join_date": self.join_date,
            "status": self.status,
            "leave_balance": self.leave_balance,
        }

    def to_dict(self) -> dict:
        out = self.to_row()
        out["created_at"] = self.created_at
        return out
