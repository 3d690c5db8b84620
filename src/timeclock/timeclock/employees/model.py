from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeRole


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee who clocks in and out.

    `face_encoding` is an opaque string produced by the capture client; the
    backend only stores and forwards it.
    """

    employee_id: str
    name: str
    email: str
    role: EmployeeRole
    department: str
    position: str
    avatar_url: Optional[str] = None
    face_encoding: Optional[str] = None
    is_active: bool = True
