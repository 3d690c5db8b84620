from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import from_utc_naive, to_utc_naive
from ..core.enums import NotificationType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Notification
from .repository import NotificationRepository


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: str,
        title: str,
        message: str,
        type: NotificationType,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications(employee_id, title, message, type, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee_id, title, message, type.value, to_utc_naive(created_at)),
            )
            return int(cur.lastrowid)

    def list_recent(self, employee_id: str, limit: int) -> Sequence[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, title, message, type, `read`, created_at
                FROM notifications
                WHERE employee_id=%s
                ORDER BY created_at DESC, id DESC
                LIMIT %s
                """,
                (employee_id, int(limit)),
            )
            return [
                Notification(
                    notification_id=int(r["id"]),
                    employee_id=str(r["employee_id"]),
                    title=r["title"],
                    message=r["message"],
                    type=NotificationType(r["type"]),
                    read=bool(r["read"]),
                    created_at=from_utc_naive(r["created_at"]),
                )
                for r in fetchall(cur)
            ]

    def mark_read(self, notification_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE notifications SET `read`=1 WHERE id=%s", (int(notification_id),))
            return cur.rowcount > 0
