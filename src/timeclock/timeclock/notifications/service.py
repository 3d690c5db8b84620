from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_NOTIFICATION_LIMIT
from ..core.enums import NotificationType
from ..core.exceptions import NotFoundError
from .model import Notification
from .repository import NotificationRepository


class NotificationService:
    def __init__(self, notifications: NotificationRepository, *, default_limit: int = DEFAULT_NOTIFICATION_LIMIT):
        self._notifications = notifications
        self._default_limit = int(default_limit)

    def notify(
        self,
        employee_id: str,
        title: str,
        message: str,
        type: NotificationType = NotificationType.INFO,
        *,
        now: Optional[datetime] = None,
    ) -> int:
        return self._notifications.create(
            employee_id=employee_id,
            title=require_non_empty(title, "title"),
            message=require_non_empty(message, "message"),
            type=NotificationType(type),
            created_at=now or now_local(),
        )

    def recent(self, employee_id: str, *, limit: Optional[int] = None) -> Sequence[Notification]:
        return self._notifications.list_recent(employee_id, int(limit or self._default_limit))

    def mark_read(self, notification_id: int) -> None:
        if not self._notifications.mark_read(notification_id):
            raise NotFoundError(f"Notification {notification_id} does not exist")
