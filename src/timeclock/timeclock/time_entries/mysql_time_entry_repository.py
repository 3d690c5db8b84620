from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import to_utc_naive
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_where, db_cursor, fetchall, fetchone
from .mappers import COLUMNS, event_to_row, row_to_event
from .model import ClockEvent
from .repository import TimeEntryRepository


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _filters(
        employee_id: Optional[str],
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> tuple[list[str], list[object]]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)
        if start is not None:
            clauses.append("`timestamp` >= %s")
            params.append(to_utc_naive(start))
        if end is not None:
            clauses.append("`timestamp` <= %s")
            params.append(to_utc_naive(end))
        return clauses, params

    def list(
        self,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        *,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Sequence[ClockEvent]:
        clauses, params = self._filters(employee_id, start, end)
        sql = f"""
            SELECT id, employee_id, type, `timestamp`, location, latitude, longitude, notes, face_verified
            FROM time_entries
            {build_where(clauses)}
            ORDER BY `timestamp` DESC, id DESC
        """
        if limit is not None:
            sql += " LIMIT %s OFFSET %s"
            params.extend([int(limit), int(offset)])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [row_to_event(r) for r in fetchall(cur)]

    def count(
        self,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        clauses, params = self._filters(employee_id, start, end)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS n FROM time_entries {build_where(clauses)}", tuple(params))
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def append(self, event: ClockEvent) -> ClockEvent:
        row = event_to_row(event)
        columns = ", ".join(f"`{c}`" for c in COLUMNS)
        placeholders = ",".join(["%s"] * len(COLUMNS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO time_entries({columns}) VALUES({placeholders})",
                tuple(row[c] for c in COLUMNS),
            )
        return event
