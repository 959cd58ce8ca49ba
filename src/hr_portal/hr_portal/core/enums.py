from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Which portal an identity opens."""

    EMPLOYEE = "employee"
    MANAGER = "manager"


class Table(str, Enum):
    """Record store tables the application reads and writes."""

    EMPLOYEES = "employees"
    TASKS = "tasks"
    ATTENDANCE = "attendance"
    PAYSLIPS = "payslips"
    PERFORMANCE = "performance"


class TaskStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"

    def toggled(self) -> "TaskStatus":
        return TaskStatus.PENDING if self is TaskStatus.COMPLETED else TaskStatus.COMPLETED


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    """Only PRESENT is meaningful to the portals; anything else counts as absent."""

    PRESENT = "present"
    ABSENT = "absent"


class PayslipStatus(str, Enum):
    PROCESSED = "processed"


class ChangeKind(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
