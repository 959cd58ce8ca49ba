from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Table
from ..store.base import RecordStore
from .model import PayLine, Payslip
from .repository import PayslipRepository


class StorePayslipRepository(PayslipRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, payslip_id: int) -> Optional[Payslip]:
        row = self._store.select_one(Table.PAYSLIPS, eq={"id": int(payslip_id)})
        return Payslip.from_row(row) if row else None

    def list_for_employee(self, emp_id: str) -> Sequence[Payslip]:
        rows = self._store.select(Table.PAYSLIPS, eq={"emp_id": emp_id}, order_by="created_at", ascending=False)
        return [Payslip.from_row(r) for r in rows]

    def list_all(self) -> Sequence[Payslip]:
        rows = self._store.select(Table.PAYSLIPS, order_by="created_at", ascending=False)
        return [Payslip.from_row(r) for r in rows]

    def create(self, line: PayLine, *, month: str, status: str) -> Payslip:
        row = self._store.insert(
            Table.PAYSLIPS,
            {
                "emp_id": line.emp_id,
                "month": month,
                "salary": line.salary,
                "bonus": line.bonus,
                "deductions": line.deductions,
                "net_pay": line.net_pay,
                "status": status,
            },
        )
        return Payslip.from_row(row)
