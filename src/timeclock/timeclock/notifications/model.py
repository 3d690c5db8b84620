from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..core.enums import NotificationType


@dataclass(frozen=True)
class Notification:
    notification_id: int
    employee_id: str
    title: str
    message: str
    type: NotificationType
    read: bool
    created_at: datetime

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.notification_id,
            "employeeId": self.employee_id,
            "title": self.title,
            "message": self.message,
            "type": self.type.value,
            "read": self.read,
            "createdAt": self.created_at.isoformat(),
        }
