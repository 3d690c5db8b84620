from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Optional, Sequence

from ..common.validators import require_email, require_non_empty
from ..core.enums import EmployeeRole
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_EDITABLE = {"name", "email", "role", "department", "position", "avatar_url", "face_encoding"}


def _role(value: Any) -> EmployeeRole:
    try:
        return EmployeeRole(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown role: {value!r}") from exc


class EmployeeService:
    """Use case: manage employees (managers)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id!r} does not exist")
        return employee

    def create(
        self,
        *,
        name: str,
        email: str,
        role: EmployeeRole | str = EmployeeRole.EMPLOYEE,
        department: str = "",
        position: str = "",
        avatar_url: Optional[str] = None,
        face_encoding: Optional[str] = None,
    ) -> Employee:
        name = require_non_empty(name, "name")
        email = require_email(email)
        if self._employees.get_by_email(email):
            raise ValidationError("An employee with this email already exists")

        employee = Employee(
            employee_id=str(uuid.uuid4()),
            name=name,
            email=email,
            role=_role(role),
            department=(department or "").strip(),
            position=(position or "").strip(),
            avatar_url=avatar_url,
            face_encoding=face_encoding,
        )
        self._employees.create(employee)
        logger.info("Created employee %s (%s)", employee.employee_id, employee.email)
        return employee

    def update(self, employee_id: str, **changes: Any) -> Employee:
        unknown = set(changes) - _EDITABLE
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        current = self.get(employee_id)
        # None means "leave unchanged", like a partial update
        changes = {k: v for k, v in changes.items() if v is not None}
        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "name")
        if "email" in changes:
            changes["email"] = require_email(changes["email"])
            other = self._employees.get_by_email(changes["email"])
            if other and other.employee_id != employee_id:
                raise ValidationError("An employee with this email already exists")
        if "role" in changes:
            changes["role"] = _role(changes["role"])

        updated = replace(current, **changes)
        if not self._employees.update(updated):
            raise NotFoundError(f"Employee {employee_id!r} does not exist")
        return updated

    def deactivate(self, employee_id: str) -> None:
        """Soft delete: the employee disappears from listings but keeps its history."""
        self.get(employee_id)
        if not self._employees.set_active(employee_id, is_active=False):
            raise NotFoundError(f"Employee {employee_id!r} does not exist")
        logger.info("Deactivated employee %s", employee_id)
