from __future__ import annotations

from ..common.validators import require_fields
from ..core.constants import DEFAULT_MANAGER_NAME
from ..core.enums import TaskStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Task
from .repository import TaskRepository


class TaskService:
    """Use cases: manager assigns/deletes tasks, employee flips status."""

    def __init__(self, tasks: TaskRepository, *, assigned_by: str = DEFAULT_MANAGER_NAME):
        self._tasks = tasks
        self._assigned_by = assigned_by

    def assign(self, *, assigned_to: str, title: str, due_date: str) -> Task:
        require_fields(
            {"assigned_to": assigned_to, "title": title, "due_date": due_date},
            ("assigned_to", "title", "due_date"),
            message="Please fill all fields",
        )
        return self._tasks.create(
            assigned_to=assigned_to.strip(),
            assigned_by=self._assigned_by,
            title=title.strip(),
            due_date=due_date.strip(),
            status=TaskStatus.PENDING,
        )

    def toggle_status(self, task_id: int, current_status: TaskStatus | str) -> TaskStatus:
        """Write the opposite of the status the caller last saw."""
        try:
            current = TaskStatus(current_status)
        except ValueError:
            raise ValidationError("Invalid task status")

        new_status = current.toggled()
        if not self._tasks.set_status(int(task_id), new_status):
            raise NotFoundError(f"Task {task_id} not found")
        return new_status

    def delete(self, task_id: int) -> None:
        if not self._tasks.delete_by_id(int(task_id)):
            raise NotFoundError(f"Task {task_id} not found")
