from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Read-only: the application never writes attendance."""

    def get_recent_for_employee(self, emp_id: str, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_present_on(self, day: date) -> int:
        raise NotImplementedError
