from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import PerformanceRecord


class PerformanceRepository(Protocol):
    def get_for_employee(self, emp_id: str) -> Optional[PerformanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[PerformanceRecord]:
        raise NotImplementedError

    def create_default(self, emp_id: str, *, review_date: date) -> PerformanceRecord:
        """Starting record for a newly added employee."""

        raise NotImplementedError
