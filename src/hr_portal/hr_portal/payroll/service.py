from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import month_label, today_local
from ..core.enums import PayslipStatus
from ..core.exceptions import StoreError
from ..employees.model import Employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayLine, PayrollRun
from .repository import PayslipRepository

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        payslips: PayslipRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        today: Callable[[], date] = today_local,
    ):
        self._payslips = payslips
        self._calculator = calculator or StandardPayrollCalculator()
        self._today = today

    def preview(self, employees: Sequence[Employee]) -> list[PayLine]:
        return [self._calculator.pay_line(e) for e in employees]

    def process(self, employees: Sequence[Employee]) -> PayrollRun:
        """One payslip per employee, inserted one at a time in the given order.

        There is no batch atomicity: a failed insert is recorded in the run and
        the remaining employees are still processed. No rollback, no resume.
        """
        run = PayrollRun(month=month_label(self._today()))

        for employee in employees:
            line = self._calculator.pay_line(employee)
            try:
                payslip = self._payslips.create(line, month=run.month, status=PayslipStatus.PROCESSED.value)
            except StoreError as e:
                logger.warning("Payroll %s: payslip for %s failed: %s", run.month, employee.id, e)
                run.failed[employee.id] = str(e)
                continue
            run.processed.append(payslip)

        logger.info(
            "Payroll %s: %d processed, %d failed",
            run.month,
            len(run.processed),
            len(run.failed),
        )
        return run
