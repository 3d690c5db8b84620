from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class WorkSession:
    """Read-model: one clock-in paired with its clock-out, if any.

    Derived from clock events on demand and never persisted.
    """

    session_id: str
    employee_id: str
    clock_in: datetime
    clock_out: Optional[datetime]
    total_hours: Optional[float]
    date: str

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.session_id,
            "employeeId": self.employee_id,
            "clockIn": self.clock_in.isoformat(),
            "clockOut": self.clock_out.isoformat() if self.clock_out else None,
            "totalHours": self.total_hours,
            "date": self.date,
        }
