from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iso_date, iso_timestamp
from ..core.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    id: int
    assigned_to: str
    assigned_by: str
    title: str
    due_date: str
    status: TaskStatus
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Task":
        return cls(
            id=int(row["id"]),
            assigned_to=str(row["assigned_to"]),
            assigned_by=row.get("assigned_by") or "",
            title=row.get("title") or "",
            due_date=iso_date(row.get("due_date")) or "",
            status=TaskStatus(row.get("status") or TaskStatus.PENDING.value),
            created_at=iso_timestamp(row.get("created_at")),
        )

    @property
    def is_pending(self) -> bool:
        return self.status == TaskStatus.PENDING

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "assigned_to": self.assigned_to,
            "assigned_by": self.assigned_by,
            "title": self.title,
            "due_date": self.due_date,
            "status": self.status.value,
            "created_at": self.created_at,
        }
