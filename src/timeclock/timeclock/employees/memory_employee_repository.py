from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.email == email), None)

    def list_active(self) -> Sequence[Employee]:
        return sorted((e for e in self._by_id.values() if e.is_active), key=lambda e: e.name)

    def create(self, employee: Employee) -> Employee:
        self._by_id[employee.employee_id] = employee
        return employee

    def update(self, employee: Employee) -> bool:
        if employee.employee_id not in self._by_id:
            return False
        self._by_id[employee.employee_id] = employee
        return True

    def set_active(self, employee_id: str, *, is_active: bool) -> bool:
        current = self._by_id.get(employee_id)
        if not current:
            return False
        self._by_id[employee_id] = replace(current, is_active=is_active)
        return True
