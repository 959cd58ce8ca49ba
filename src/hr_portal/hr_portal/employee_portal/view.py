from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.loading import run_loads
from ..core.constants import DEFAULT_ATTENDANCE_WINDOW
from ..core.enums import Role, Table, TaskStatus
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..identity.model import Identity
from ..payroll.model import Payslip
from ..payroll.repository import PayslipRepository
from ..performance.model import PerformanceRecord
from ..performance.repository import PerformanceRepository
from ..store.feed import ChangeEvent, ChangeFeed, Subscription
from ..tasks.model import Task
from ..tasks.repository import TaskRepository
from ..tasks.service import TaskService

logger = logging.getLogger(__name__)


class EmployeeView:
    """One employee's portal: profile, tasks, attendance, payslips, performance.

    Holds the last loaded copy of each collection. `open()` subscribes to
    changes on the employee's tasks, payslips and performance and reloads the
    matching collection on every event; `close()` tears the subscriptions down.
    """

    def __init__(
        self,
        identity: Identity,
        *,
        employees: EmployeeRepository,
        tasks: TaskRepository,
        attendance: AttendanceRepository,
        payslips: PayslipRepository,
        performance: PerformanceRepository,
        task_service: TaskService,
        changes: ChangeFeed,
        attendance_window: int = DEFAULT_ATTENDANCE_WINDOW,
    ):
        if identity.role != Role.EMPLOYEE or not identity.emp_id:
            raise ValidationError("Employee portal needs an employee identity")

        self.identity = identity
        self._employees = employees
        self._tasks = tasks
        self._attendance = attendance
        self._payslips = payslips
        self._performance = performance
        self._task_service = task_service
        self._changes = changes
        self._attendance_window = int(attendance_window)
        self._subscriptions: list[Subscription] = []

        self.profile: Optional[Employee] = None
        self.tasks: list[Task] = []
        self.attendance: list[AttendanceRecord] = []
        self.payslips: list[Payslip] = []
        self.performance: Optional[PerformanceRecord] = None

    @property
    def emp_id(self) -> str:
        return self.identity.emp_id or ""

    # ---- lifecycle ----

    def open(self) -> list[str]:
        """Subscribe once and run the initial load. Returns the names of failed loads.

        A load failing with anything but StoreError closes the view and re-raises.
        """
        if not self._subscriptions:
            self._subscriptions = [
                self._changes.subscribe(Table.TASKS, "assigned_to", self.emp_id, self._on_change(self.load_tasks)),
                self._changes.subscribe(Table.PAYSLIPS, "emp_id", self.emp_id, self._on_change(self.load_payslips)),
                self._changes.subscribe(
                    Table.PERFORMANCE, "emp_id", self.emp_id, self._on_change(self.load_performance)
                ),
            ]
        try:
            return self.load_all()
        except Exception:
            self.close()
            raise

    def close(self) -> None:
        for sub in self._subscriptions:
            sub.unsubscribe()
        self._subscriptions = []

    @property
    def is_live(self) -> bool:
        return bool(self._subscriptions)

    def _on_change(self, reload):
        def handler(event: ChangeEvent) -> None:
            logger.debug("%s on %s for %s, reloading", event.kind.value, event.table.value, self.emp_id)
            try:
                reload()
            except StoreError as e:
                logger.warning("Reload after %s %s failed: %s", event.kind.value, event.table.value, e)

        return handler

    # ---- loads ----

    def load_all(self) -> list[str]:
        return run_loads(
            {
                "profile": self.load_profile,
                "tasks": self.load_tasks,
                "attendance": self.load_attendance,
                "payslips": self.load_payslips,
                "performance": self.load_performance,
            }
        )

    def load_profile(self) -> Optional[Employee]:
        # A missing row leaves the profile empty; it is not an error here.
        self.profile = self._employees.get_by_id(self.emp_id)
        return self.profile

    def load_tasks(self) -> Sequence[Task]:
        self.tasks = list(self._tasks.list_for_assignee(self.emp_id))
        return self.tasks

    def load_attendance(self) -> Sequence[AttendanceRecord]:
        self.attendance = list(self._attendance.get_recent_for_employee(self.emp_id, self._attendance_window))
        return self.attendance

    def load_payslips(self) -> Sequence[Payslip]:
        self.payslips = list(self._payslips.list_for_employee(self.emp_id))
        return self.payslips

    def load_performance(self) -> Optional[PerformanceRecord]:
        self.performance = self._performance.get_for_employee(self.emp_id)
        return self.performance

    # ---- actions ----

    def toggle_task(self, task_id: int, current_status: TaskStatus | str) -> str:
        """Flip a task between pending and completed, then reload the task list.

        A StoreError propagates and leaves the loaded tasks as they were.
        """
        new_status = self._task_service.toggle_status(task_id, current_status)
        self.load_tasks()
        return f"Task marked as {new_status.value}"

    def request_payslip_download(self, payslip_id: int) -> str:
        """Acknowledge only; no document is produced."""
        payslip = next((p for p in self.payslips if p.id == int(payslip_id)), None)
        if payslip is None:
            payslip = self._payslips.get_by_id(int(payslip_id))
        if payslip is None or payslip.emp_id != self.emp_id:
            raise NotFoundError("Payslip not found")
        return f"Downloading payslip for {payslip.month}"

    # ---- derived values (from loaded data only) ----

    @property
    def pending_task_count(self) -> int:
        return sum(1 for t in self.tasks if t.is_pending)

    @property
    def present_day_count(self) -> int:
        return sum(1 for a in self.attendance if a.is_present)

    def dashboard(self) -> dict:
        return {
            "pending_tasks": self.pending_task_count,
            "present_days": self.present_day_count,
            "leave_balance": self.profile.leave_balance if self.profile else 0,
            "rating": self.performance.rating if self.performance else None,
        }

    def snapshot(self) -> dict:
        return {
            "identity": self.identity.to_session(),
            "profile": self.profile.to_dict() if self.profile else None,
            "tasks": [t.to_dict() for t in self.tasks],
            "attendance": [a.to_dict() for a in self.attendance],
            "payslips": [p.to_dict() for p in self.payslips],
            "performance": self.performance.to_dict() if self.performance else None,
            "dashboard": self.dashboard(),
        }
