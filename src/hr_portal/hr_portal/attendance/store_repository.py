from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus, Table
from ..store.base import RecordStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_recent_for_employee(self, emp_id: str, limit: int) -> Sequence[AttendanceRecord]:
        rows = self._store.select(
            Table.ATTENDANCE,
            eq={"emp_id": emp_id},
            order_by="date",
            ascending=False,
            limit=int(limit),
        )
        return [AttendanceRecord.from_row(r) for r in rows]

    def count_present_on(self, day: date) -> int:
        rows = self._store.select(
            Table.ATTENDANCE,
            eq={"date": day.isoformat(), "status": AttendanceStatus.PRESENT.value},
        )
        return len(rows)
