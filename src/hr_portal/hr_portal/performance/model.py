from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_date, iso_timestamp
from ..common.numbers import as_int


@dataclass(frozen=True)
class PerformanceRecord:
    """Review summary for one employee (one row per emp_id by convention)."""

    id: Optional[int]
    emp_id: str
    rating: str
    tasks_completed: int
    attendance_percent: int
    last_review: Optional[str]
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PerformanceRecord":
        return cls(
            id=int(row["id"]) if row.get("id") is not None else None,
            emp_id=str(row["emp_id"]),
            rating=str(row.get("rating") or ""),
            tasks_completed=as_int(row.get("tasks_completed")),
            attendance_percent=as_int(row.get("attendance_percent")),
            last_review=iso_date(row.get("last_review")),
            created_at=iso_timestamp(row.get("created_at")),
            updated_at=iso_timestamp(row.get("updated_at")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "emp_id": self.emp_id,
            "rating": self.rating,
            "tasks_completed": self.tasks_completed,
            "attendance_percent": self.attendance_percent,
            "last_review": self.last_review,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
