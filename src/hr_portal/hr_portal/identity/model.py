from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    """The resolved actor for one session.

    Replaced wholesale on login/logout; passed into each portal view.
    """

    role: Role
    username: str
    emp_id: Optional[str] = None
    emp_name: Optional[str] = None

    @classmethod
    def manager(cls, username: str) -> "Identity":
        return cls(role=Role.MANAGER, username=username)

    @classmethod
    def employee(cls, username: str, *, emp_id: str, emp_name: str) -> "Identity":
        return cls(role=Role.EMPLOYEE, username=username, emp_id=emp_id, emp_name=emp_name)

    @property
    def display_name(self) -> str:
        return self.emp_name or self.username

    @property
    def session_owner(self) -> str:
        """One live portal view per owner; a new login replaces the older view."""
        return f"{self.role.value}:{self.emp_id or self.username}"

    def to_session(self) -> dict:
        return {
            "role": self.role.value,
            "username": self.username,
            "emp_id": self.emp_id,
            "emp_name": self.emp_name,
        }

    @classmethod
    def from_session(cls, data: Mapping[str, Any]) -> "Identity":
        return cls(
            role=Role(data["role"]),
            username=data["username"],
            emp_id=data.get("emp_id"),
            emp_name=data.get("emp_name"),
        )
