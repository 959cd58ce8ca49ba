from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import Callable, Sequence

from ..common.datetime_utils import today_local
from ..common.numbers import Number, as_int, as_number
from ..common.validators import require_fields
from ..core.constants import DEFAULT_DEPARTMENT, DEFAULT_LEAVE_BALANCE, DEFAULT_MANAGER_NAME
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, PartialFailureError, StoreError, ValidationError
from ..performance.repository import PerformanceRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

NEW_EMPLOYEE_REQUIRED = ("id", "name", "email", "phone", "position", "join_date")
EDIT_EMPLOYEE_REQUIRED = ("name", "email", "phone", "position")


@dataclass(frozen=True)
class NewEmployee:
    id: str
    name: str
    email: str
    phone: str
    position: str
    join_date: str
    department: str = DEFAULT_DEPARTMENT
    base_salary: Number = 0


@dataclass(frozen=True)
class EmployeeUpdate:
    """Full overwrite of the mutable fields; id selects the row and never changes."""

    id: str
    name: str
    email: str
    phone: str
    department: str
    position: str
    base_salary: Number
    join_date: str
    leave_balance: int = DEFAULT_LEAVE_BALANCE


class DirectoryService:
    """Use case: manager maintains the employee directory."""

    def __init__(
        self,
        employees: EmployeeRepository,
        performance: PerformanceRepository,
        *,
        today: Callable[[], date] = today_local,
    ):
        self._employees = employees
        self._performance = performance
        self._today = today

    def list_directory(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def add_employee(self, data: NewEmployee) -> Employee:
        """Insert the employee, then its default performance record.

        The two inserts are independent: if the second fails the employee stays
        and PartialFailureError is raised. Nothing is rolled back.
        """
        require_fields(asdict(data), NEW_EMPLOYEE_REQUIRED, message="Please fill all fields")

        employee = self._employees.create(
            Employee(
                id=data.id.strip(),
                name=data.name.strip(),
                email=data.email.strip(),
                phone=data.phone.strip(),
                department=(data.department or "").strip() or DEFAULT_DEPARTMENT,
                position=data.position.strip(),
                manager=DEFAULT_MANAGER_NAME,
                base_salary=as_number(data.base_salary),
                join_date=data.join_date.strip(),
                status=EmployeeStatus.ACTIVE.value,
                leave_balance=DEFAULT_LEAVE_BALANCE,
            )
        )

        try:
            self._performance.create_default(employee.id, review_date=self._today())
        except StoreError as e:
            logger.warning("Employee %s added without a performance record: %s", employee.id, e)
            raise PartialFailureError(
                f"Employee {employee.id} was added but the performance record could not be created: {e}"
            ) from e

        logger.info("Employee %s added", employee.id)
        return employee

    def edit_employee(self, data: EmployeeUpdate) -> Employee:
        require_fields(asdict(data), EDIT_EMPLOYEE_REQUIRED, message="Please fill all required fields")
        if not (data.id or "").strip():
            raise ValidationError("Employee ID is required")

        updated = self._employees.update(
            data.id,
            {
                "name": data.name.strip(),
                "email": data.email.strip(),
                "phone": data.phone.strip(),
                "department": (data.department or "").strip() or DEFAULT_DEPARTMENT,
                "position": data.position.strip(),
                "base_salary": as_number(data.base_salary),
                "join_date": (data.join_date or "").strip(),
                "leave_balance": as_int(data.leave_balance, DEFAULT_LEAVE_BALANCE),
            },
        )
        if not updated:
            raise NotFoundError(f"Employee {data.id} not found")
        return updated

    def delete_employee(self, emp_id: str) -> None:
        """Remove the directory row only; tasks, payslips and performance rows stay."""
        if not self._employees.delete_by_id(emp_id):
            raise NotFoundError(f"Employee {emp_id} not found")
        logger.info("Employee %s deleted", emp_id)
