"""Row adapters between the `employees` table and Employee."""
from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import EmployeeRole
from .model import Employee

COLUMNS = (
    "id",
    "name",
    "email",
    "role",
    "department",
    "position",
    "avatar_url",
    "face_encoding",
    "is_active",
)


def row_to_employee(row: Mapping[str, Any]) -> Employee:
    return Employee(
        employee_id=str(row["id"]),
        name=row["name"],
        email=row["email"],
        role=EmployeeRole(row.get("role") or EmployeeRole.EMPLOYEE.value),
        department=row.get("department") or "",
        position=row.get("position") or "",
        avatar_url=row.get("avatar_url"),
        face_encoding=row.get("face_encoding"),
        is_active=bool(row.get("is_active", True)),
    )


def employee_to_row(employee: Employee) -> dict[str, Any]:
    return {
        "id": employee.employee_id,
        "name": employee.name,
        "email": employee.email,
        "role": employee.role.value,
        "department": employee.department,
        "position": employee.position,
        "avatar_url": employee.avatar_url,
        "face_encoding": employee.face_encoding,
        "is_active": 1 if employee.is_active else 0,
    }


def employee_to_json(employee: Employee) -> dict[str, Any]:
    return {
        "id": employee.employee_id,
        "name": employee.name,
        "email": employee.email,
        "role": employee.role.value,
        "department": employee.department,
        "position": employee.position,
        "avatar": employee.avatar_url,
        "faceEncoding": employee.face_encoding,
    }
