from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .mappers import COLUMNS, employee_to_row, row_to_employee
from .model import Employee
from .repository import EmployeeRepository

_SELECT = "SELECT id, name, email, role, department, position, avatar_url, face_encoding, is_active FROM employees"


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return row_to_employee(row) if row else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE email=%s", (email,))
            row = fetchone(cur)
            return row_to_employee(row) if row else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE is_active=1 ORDER BY name")
            return [row_to_employee(r) for r in fetchall(cur)]

    def create(self, employee: Employee) -> Employee:
        row = employee_to_row(employee)
        placeholders = ",".join(["%s"] * len(COLUMNS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO employees({', '.join(COLUMNS)}) VALUES({placeholders})",
                tuple(row[c] for c in COLUMNS),
            )
        return employee

    def update(self, employee: Employee) -> bool:
        row = employee_to_row(employee)
        fields = [c for c in COLUMNS if c != "id"]
        assignments = ", ".join(f"{c}=%s" for c in fields)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE employees SET {assignments}, updated_at=CURRENT_TIMESTAMP(6) WHERE id=%s",
                tuple(row[c] for c in fields) + (employee.employee_id,),
            )
            return cur.rowcount > 0

    def set_active(self, employee_id: str, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=%s, updated_at=CURRENT_TIMESTAMP(6) WHERE id=%s",
                (1 if is_active else 0, employee_id),
            )
            return cur.rowcount > 0
