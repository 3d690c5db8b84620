from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import ClockEvent


class TimeEntryRepository(Protocol):
    """Read/append boundary of the clock event log.

    Implementations return events most recent first and apply the employee and
    [start, end] filters in the store, not in memory after a full scan.
    """

    def list(
        self,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        *,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Sequence[ClockEvent]:
        raise NotImplementedError

    def count(
        self,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        raise NotImplementedError

    def append(self, event: ClockEvent) -> ClockEvent:
        raise NotImplementedError
