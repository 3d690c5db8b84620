from __future__ import annotations

import logging
import uuid
from datetime import datetime, tzinfo
from typing import Optional, Sequence

from ..common.datetime_utils import as_aware, day_bounds, local_day, now_local
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import ClockStatus, EventKind, NotificationType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..notifications.service import NotificationService
from ..sessions.model import WorkSession
from ..sessions.reconstructor import reconstruct_sessions, total_hours
from ..sessions.strategies.base import PairingStrategy
from ..time_entries.model import ClockEvent
from ..time_entries.repository import TimeEntryRepository

logger = logging.getLogger(__name__)

_MESSAGES = {
    EventKind.CLOCK_IN: ("Clocked in", "Your clock-in was recorded"),
    EventKind.CLOCK_OUT: ("Clocked out", "Your clock-out was recorded"),
}


class TimeTrackingService:
    """Use case: record clock actions and read them back as sessions."""

    def __init__(
        self,
        entries: TimeEntryRepository,
        employees: Optional[EmployeeRepository] = None,
        notifications: Optional[NotificationService] = None,
        *,
        pairing: Optional[PairingStrategy] = None,
        tz: Optional[tzinfo] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._entries = entries
        self._employees = employees
        self._notifications = notifications
        self._pairing = pairing
        self._tz = tz
        self._page_size = int(page_size)

    @property
    def tz(self) -> Optional[tzinfo]:
        return self._tz

    def _require_active_employee(self, employee_id: str) -> None:
        if not employee_id or not str(employee_id).strip():
            raise ValidationError("employee id is required")
        if self._employees is None:
            return
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id!r} does not exist")
        if not employee.is_active:
            raise ValidationError(f"Employee {employee_id!r} is inactive")

    def _record(
        self,
        kind: EventKind,
        employee_id: str,
        *,
        location: Optional[str],
        latitude: Optional[float],
        longitude: Optional[float],
        notes: Optional[str],
        face_verified: bool,
        now: Optional[datetime],
    ) -> ClockEvent:
        self._require_active_employee(employee_id)

        event = ClockEvent(
            event_id=uuid.uuid4().hex,
            employee_id=employee_id,
            kind=kind,
            timestamp=as_aware(now) if now else now_local(),
            location=location,
            notes=notes,
            latitude=latitude,
            longitude=longitude,
            face_verified=bool(face_verified),
        )
        self._entries.append(event)
        logger.info("%s recorded for %s at %s", kind.value, employee_id, event.timestamp.isoformat())

        if self._notifications is not None:
            title, message = _MESSAGES[kind]
            try:
                self._notifications.notify(employee_id, title, message, NotificationType.SUCCESS, now=event.timestamp)
            except Exception:
                # the clock event is already stored; a lost notification must not undo it
                logger.exception("Could not create %s notification for %s", kind.value, employee_id)
        return event

    def clock_in(
        self,
        employee_id: str,
        *,
        location: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        face_verified: bool = False,
        now: Optional[datetime] = None,
    ) -> ClockEvent:
        return self._record(
            EventKind.CLOCK_IN,
            employee_id,
            location=location,
            latitude=latitude,
            longitude=longitude,
            notes=None,
            face_verified=face_verified,
            now=now,
        )

    def clock_out(
        self,
        employee_id: str,
        *,
        location: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        notes: Optional[str] = None,
        face_verified: bool = False,
        now: Optional[datetime] = None,
    ) -> ClockEvent:
        return self._record(
            EventKind.CLOCK_OUT,
            employee_id,
            location=location,
            latitude=latitude,
            longitude=longitude,
            notes=notes,
            face_verified=face_verified,
            now=now,
        )

    def get_time_entries(
        self,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[ClockEvent]:
        """All matching events, most recent first, read page by page."""
        events: list[ClockEvent] = []
        offset = 0
        while True:
            page = self._entries.list(employee_id, start, end, limit=self._page_size, offset=offset)
            events.extend(page)
            if len(page) < self._page_size:
                return events
            offset += self._page_size

    def get_work_sessions(
        self,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[WorkSession]:
        events = self.get_time_entries(employee_id, start, end)
        return reconstruct_sessions(events, start=start, end=end, tz=self._tz, pairing=self._pairing)

    def _today(self, now: Optional[datetime]) -> tuple[datetime, datetime]:
        return day_bounds(local_day(now or now_local(), self._tz), self._tz)

    def get_current_status(self, employee_id: str, *, now: Optional[datetime] = None) -> ClockStatus:
        start, end = self._today(now)
        latest = self._entries.list(employee_id, start, end, limit=1)
        if not latest:
            return ClockStatus.CLOCKED_OUT
        return ClockStatus.CLOCKED_IN if latest[0].kind == EventKind.CLOCK_IN else ClockStatus.CLOCKED_OUT

    def get_today_hours(self, employee_id: str, *, now: Optional[datetime] = None) -> float:
        start, end = self._today(now)
        return total_hours(self.get_work_sessions(employee_id, start, end))
