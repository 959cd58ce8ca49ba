from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee directory.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, emp_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by id ascending."""

        raise NotImplementedError

    def create(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(self, emp_id: str, values: Mapping[str, Any]) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, emp_id: str) -> bool:
        raise NotImplementedError
