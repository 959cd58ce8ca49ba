from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import DEFAULT_ATTENDANCE_PERCENT, DEFAULT_RATING
from ..core.enums import Table
from ..store.base import RecordStore
from .model import PerformanceRecord
from .repository import PerformanceRepository


class StorePerformanceRepository(PerformanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_for_employee(self, emp_id: str) -> Optional[PerformanceRecord]:
        row = self._store.select_one(Table.PERFORMANCE, eq={"emp_id": emp_id})
        return PerformanceRecord.from_row(row) if row else None

    def list_all(self) -> Sequence[PerformanceRecord]:
        return [PerformanceRecord.from_row(r) for r in self._store.select(Table.PERFORMANCE)]

    def create_default(self, emp_id: str, *, review_date: date) -> PerformanceRecord:
        row = self._store.insert(
            Table.PERFORMANCE,
            {
                "emp_id": emp_id,
                "rating": DEFAULT_RATING,
                "tasks_completed": 0,
                "attendance_percent": DEFAULT_ATTENDANCE_PERCENT,
                "last_review": review_date.isoformat(),
            },
        )
        return PerformanceRecord.from_row(row)
