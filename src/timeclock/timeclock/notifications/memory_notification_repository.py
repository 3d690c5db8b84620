from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Sequence

from ..core.enums import NotificationType
from .model import Notification
from .repository import NotificationRepository


class InMemoryNotificationRepository(NotificationRepository):
    def __init__(self):
        self._items: dict[int, Notification] = {}
        self._id = 0

    def create(
        self,
        *,
        employee_id: str,
        title: str,
        message: str,
        type: NotificationType,
        created_at: datetime,
    ) -> int:
        self._id += 1
        self._items[self._id] = Notification(
            notification_id=self._id,
            employee_id=employee_id,
            title=title,
            message=message,
            type=type,
            read=False,
            created_at=created_at,
        )
        return self._id

    def list_recent(self, employee_id: str, limit: int) -> Sequence[Notification]:
        items = [n for n in self._items.values() if n.employee_id == employee_id]
        items.sort(key=lambda n: (n.created_at, n.notification_id), reverse=True)
        return items[:limit]

    def mark_read(self, notification_id: int) -> bool:
        current = self._items.get(int(notification_id))
        if not current:
            return False
        self._items[current.notification_id] = replace(current, read=True)
        return True
