from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..common.loading import run_loads
from ..core.enums import Role
from ..core.exceptions import NotFoundError, PartialFailureError, ValidationError
from ..employees.model import Employee
from ..employees.service import DirectoryService, EmployeeUpdate, NewEmployee
from ..identity.model import Identity
from ..payroll.model import PayLine, PayrollRun, Payslip
from ..payroll.repository import PayslipRepository
from ..payroll.service import PayrollService
from ..performance.model import PerformanceRecord
from ..performance.repository import PerformanceRepository
from ..tasks.model import Task
from ..tasks.repository import TaskRepository
from ..tasks.service import TaskService

logger = logging.getLogger(__name__)


class ManagerView:
    """Manager portal: directory CRUD, task assignment, payroll, performance.

    No change subscriptions; every mutation re-fetches what it touched.
    """

    def __init__(
        self,
        identity: Identity,
        *,
        directory: DirectoryService,
        task_service: TaskService,
        payroll: PayrollService,
        tasks: TaskRepository,
        payslips: PayslipRepository,
        performance: PerformanceRepository,
        attendance: AttendanceRepository,
        today: Callable[[], date] = today_local,
    ):
        if identity.role != Role.MANAGER:
            raise ValidationError("Manager portal needs a manager identity")

        self.identity = identity
        self._directory = directory
        self._task_service = task_service
        self._payroll = payroll
        self._tasks = tasks
        self._payslips = payslips
        self._performance = performance
        self._attendance = attendance
        self._today = today

        self.employees: list[Employee] = []
        self.tasks: list[Task] = []
        self.payslips: list[Payslip] = []
        self.performance: list[PerformanceRecord] = []

    def open(self) -> list[str]:
        return self.load_all()

    def close(self) -> None:
        """Nothing to tear down; present for symmetry with EmployeeView."""

    # ---- loads ----

    def load_all(self) -> list[str]:
        return run_loads(
            {
                "employees": self.load_directory,
                "tasks": self.load_tasks,
                "payslips": self.load_payslips,
                "performance": self.load_performance,
            }
        )

    def load_directory(self) -> Sequence[Employee]:
        self.employees = list(self._directory.list_directory())
        return self.employees

    def load_tasks(self) -> Sequence[Task]:
        self.tasks = list(self._tasks.list_all())
        return self.tasks

    def load_payslips(self) -> Sequence[Payslip]:
        self.payslips = list(self._payslips.list_all())
        return self.payslips

    def load_performance(self) -> Sequence[PerformanceRecord]:
        self.performance = list(self._performance.list_all())
        return self.performance

    # ---- directory ----

    def add_employee(self, data: NewEmployee) -> Employee:
        try:
            employee = self._directory.add_employee(data)
        except PartialFailureError:
            # the employee row exists, so the directory must show it
            self.load_all()
            raise
        self.load_all()
        return employee

    def edit_employee(self, data: EmployeeUpdate) -> Employee:
        employee = self._directory.edit_employee(data)
        self.load_all()
        return employee

    def delete_employee(self, emp_id: str, *, confirmed: bool) -> None:
        if not confirmed:
            raise ValidationError("Please confirm deleting this employee")
        self._directory.delete_employee(emp_id)
        self.load_all()

    # ---- tasks ----

    def assign_task(self, *, assigned_to: str, title: str, due_date: str) -> Task:
        task = self._task_service.assign(assigned_to=assigned_to, title=title, due_date=due_date)
        self.load_tasks()
        return task

    def delete_task(self, task_id: int, *, confirmed: bool) -> None:
        if not confirmed:
            raise ValidationError("Please confirm deleting this task")
        self._task_service.delete(task_id)
        self.load_tasks()

    # ---- payroll ----

    def preview_payroll(self) -> list[PayLine]:
        return self._payroll.preview(self.employees)

    def process_payroll(self) -> PayrollRun:
        """Pay every employee currently in the loaded directory, in directory order."""
        run = self._payroll.process(self.employees)
        self.load_payslips()
        return run

    # ---- performance ----

    def review_performance(self, emp_id: str) -> str:
        """Display-only: nothing is written."""
        employee = next((e for e in self.employees if e.id == emp_id), None)
        if employee is None:
            raise NotFoundError(f"Employee {emp_id} not found")
        return f"Performance review for {employee.name}"

    # ---- derived values ----

    @property
    def pending_task_count(self) -> int:
        return sum(1 for t in self.tasks if t.is_pending)

    def present_today(self) -> int:
        return self._attendance.count_present_on(self._today())

    def dashboard(self) -> dict:
        return {
            "total_employees": len(self.employees),
            "present_today": self.present_today(),
            "pending_tasks": self.pending_task_count,
        }

    def snapshot(self) -> dict:
        return {
            "identity": self.identity.to_session(),
            "employees": [e.to_dict() for e in self.employees],
            "tasks": [t.to_dict() for t in self.tasks],
            "payslips": [p.to_dict() for p in self.payslips],
            "performance": [p.to_dict() for p in self.performance],
        }
