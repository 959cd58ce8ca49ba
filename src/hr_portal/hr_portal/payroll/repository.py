from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayLine, Payslip


class PayslipRepository(Protocol):
    """Payslips are only ever created; never edited or deleted."""

    def get_by_id(self, payslip_id: int) -> Optional[Payslip]:
        raise NotImplementedError

    def list_for_employee(self, emp_id: str) -> Sequence[Payslip]:
        """Newest first."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Payslip]:
        raise NotImplementedError

    def create(self, line: PayLine, *, month: str, status: str) -> Payslip:
        raise NotImplementedError
