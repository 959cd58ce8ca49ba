from __future__ import annotations

import math

from ...core.constants import PAYROLL_DEDUCTION_RATE, PAYROLL_FLAT_BONUS
from ...employees.model import Employee
from ..model import PayLine
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: flat bonus, deductions = floor(base_salary * rate)."""

    def __init__(self, *, bonus: int = PAYROLL_FLAT_BONUS, deduction_rate: float = PAYROLL_DEDUCTION_RATE):
        self._bonus = bonus
        self._deduction_rate = deduction_rate

    def pay_line(self, employee: Employee) -> PayLine:
        salary = employee.base_salary
        return PayLine(
            emp_id=employee.id,
            name=employee.name,
            salary=salary,
            bonus=self._bonus,
            deductions=math.floor(salary * self._deduction_rate),
        )
