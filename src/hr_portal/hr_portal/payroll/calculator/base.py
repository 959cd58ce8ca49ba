from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import Employee
from ..model import PayLine


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def pay_line(self, employee: Employee) -> PayLine:
        raise NotImplementedError
