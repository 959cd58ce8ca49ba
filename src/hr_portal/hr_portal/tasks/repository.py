from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task


class TaskRepository(Protocol):
    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def list_for_assignee(self, emp_id: str) -> Sequence[Task]:
        """Tasks assigned to one employee, earliest due date first."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def create(self, *, assigned_to: str, assigned_by: str, title: str, due_date: str, status: TaskStatus) -> Task:
        raise NotImplementedError

    def set_status(self, task_id: int, status: TaskStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, task_id: int) -> bool:
        raise NotImplementedError
