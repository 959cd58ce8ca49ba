from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Table, TaskStatus
from ..store.base import RecordStore
from .model import Task
from .repository import TaskRepository


class StoreTaskRepository(TaskRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, task_id: int) -> Optional[Task]:
        row = self._store.select_one(Table.TASKS, eq={"id": int(task_id)})
        return Task.from_row(row) if row else None

    def list_for_assignee(self, emp_id: str) -> Sequence[Task]:
        rows = self._store.select(Table.TASKS, eq={"assigned_to": emp_id}, order_by="due_date", ascending=True)
        return [Task.from_row(r) for r in rows]

    def list_all(self) -> Sequence[Task]:
        rows = self._store.select(Table.TASKS, order_by="due_date", ascending=True)
        return [Task.from_row(r) for r in rows]

    def create(self, *, assigned_to: str, assigned_by: str, title: str, due_date: str, status: TaskStatus) -> Task:
        row = self._store.insert(
            Table.TASKS,
            {
                "assigned_to": assigned_to,
                "assigned_by": assigned_by,
                "title": title,
                "due_date": due_date,
                "status": status.value,
            },
        )
        return Task.from_row(row)

    def set_status(self, task_id: int, status: TaskStatus) -> bool:
        return bool(self._store.update(Table.TASKS, {"status": status.value}, eq={"id": int(task_id)}))

    def delete_by_id(self, task_id: int) -> bool:
        return bool(self._store.delete(Table.TASKS, eq={"id": int(task_id)}))
