from __future__ import annotations

import logging
from typing import Any

from ..common.validators import is_blank
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Identity

logger = logging.getLogger(__name__)


class IdentityGate:
    """Use case: pick the portal identity for a username/role pair.

    This selects an identity; it is not authentication. The password is only
    checked for presence.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def resolve(self, username: Any, password: Any, role: Role | str) -> Identity:
        # JSON bodies may carry numbers here
        username = "" if username is None else str(username)
        password = "" if password is None else str(password)
        if is_blank(username) or is_blank(password):
            raise ValidationError("Please enter credentials")

        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Invalid portal type")

        username = username.strip()
        if role == Role.MANAGER:
            return Identity.manager(username)

        employee = self._employees.get_by_id(username.upper())
        if not employee:
            logger.info("Login rejected: no employee with id %s", username.upper())
            raise NotFoundError("Invalid employee ID")

        return Identity.employee(username, emp_id=employee.id, emp_name=employee.name)
