from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_date, iso_timestamp
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One day of attendance. Rows are populated outside the application."""

    id: int
    emp_id: str
    date: str
    status: str
    check_in: Optional[str]
    check_out: Optional[str]
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            id=int(row["id"]),
            emp_id=str(row["emp_id"]),
            date=iso_date(row.get("date")) or "",
            status=str(row.get("status") or ""),
            check_in=row.get("check_in"),
            check_out=row.get("check_out"),
            created_at=iso_timestamp(row.get("created_at")),
        )

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT.value

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "emp_id": self.emp_id,
            "date": self.date,
            "status": self.status,
            "check_in": self.check_in,
            "check_out": self.check_out,
            "created_at": self.created_at,
        }
