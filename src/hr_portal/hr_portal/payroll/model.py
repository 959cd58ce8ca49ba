from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_timestamp
from ..common.numbers import Number, as_number


@dataclass(frozen=True)
class Payslip:
    id: Optional[int]
    emp_id: str
    month: str
    salary: Number
    bonus: Number
    deductions: Number
    net_pay: Number
    status: str
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Payslip":
        return cls(
            id=int(row["id"]) if row.get("id") is not None else None,
            emp_id=str(row["emp_id"]),
            month=str(row.get("month") or ""),
            salary=as_number(row.get("salary")),
            bonus=as_number(row.get("bonus")),
            deductions=as_number(row.get("deductions")),
            net_pay=as_number(row.get("net_pay")),
            status=str(row.get("status") or ""),
            created_at=iso_timestamp(row.get("created_at")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "emp_id": self.emp_id,
            "month": self.month,
            "salary": self.salary,
            "bonus": self.bonus,
            "deductions": self.deductions,
            "net_pay": self.net_pay,
            "status": self.status,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class PayLine:
    """Computed pay for one employee, before it is written as a payslip."""

    emp_id: str
    name: str
    salary: Number
    bonus: Number
    deductions: Number

    @property
    def net_pay(self) -> Number:
        return self.salary + self.bonus - self.deductions

    def to_dict(self) -> dict:
        return {
            "emp_id": self.emp_id,
            "name": self.name,
            "salary": self.salary,
            "bonus": self.bonus,
            "deductions": self.deductions,
            "net_pay": self.net_pay,
        }


@dataclass
class PayrollRun:
    """Outcome of one payroll batch. Each employee's insert stands alone."""

    month: str
    processed: list[Payslip] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def complete(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "processed": [p.to_dict() for p in self.processed],
            "failed": dict(self.failed),
        }
