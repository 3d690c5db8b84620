from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import NotificationType
from .model import Notification


class NotificationRepository(Protocol):
    def create(
        self,
        *,
        employee_id: str,
        title: str,
        message: str,
        type: NotificationType,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def list_recent(self, employee_id: str, limit: int) -> Sequence[Notification]:
        raise NotImplementedError

    def mark_read(self, notification_id: int) -> bool:
        raise NotImplementedError
