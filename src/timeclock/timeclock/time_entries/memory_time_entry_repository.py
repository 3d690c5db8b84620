from __future__ import annotations

import bisect
import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_aware
from ..core.constants import DEFAULT_MEMORY_LOG_CAPACITY
from .model import ClockEvent
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


def _sort_key(event: ClockEvent) -> tuple[datetime, str]:
    return as_aware(event.timestamp), event.event_id


class InMemoryTimeEntryRepository(TimeEntryRepository):
    """Bounded event log kept in timestamp order.

    Range queries bisect the ordered log instead of scanning it. Once
    `capacity` is reached the oldest events are evicted.
    """

    def __init__(self, events: Sequence[ClockEvent] = (), *, capacity: int = DEFAULT_MEMORY_LOG_CAPACITY):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = int(capacity)
        self._events: list[ClockEvent] = []
        self._keys: list[tuple[datetime, str]] = []
        for event in events:
            self.append(event)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._events)

    def _window(self, start: Optional[datetime], end: Optional[datetime]) -> tuple[int, int]:
        lo = 0 if start is None else bisect.bisect_left(self._keys, (as_aware(start), ""))
        if end is None:
            hi = len(self._keys)
        else:
            end = as_aware(end)
            hi = bisect.bisect_right(self._keys, (end, chr(0x10FFFF)))
        return lo, hi

    def _select(
        self,
        employee_id: Optional[str],
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> list[ClockEvent]:
        lo, hi = self._window(start, end)
        selected = self._events[lo:hi]
        if employee_id is not None:
            selected = [e for e in selected if e.employee_id == employee_id]
        selected.reverse()
        return selected

    def list(
        self,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        *,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Sequence[ClockEvent]:
        selected = self._select(employee_id, start, end)
        if limit is None:
            return selected[offset:]
        return selected[offset:offset + int(limit)]

    def count(
        self,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        return len(self._select(employee_id, start, end))

    def append(self, event: ClockEvent) -> ClockEvent:
        key = _sort_key(event)
        idx = bisect.bisect_right(self._keys, key)
        self._keys.insert(idx, key)
        self._events.insert(idx, event)

        overflow = len(self._events) - self._capacity
        if overflow > 0:
            del self._keys[:overflow]
            del self._events[:overflow]
            if idx < overflow:
                logger.warning(
                    "Event %s at %s is older than the retained log and was not kept",
                    event.event_id,
                    event.timestamp.isoformat(),
                )
            logger.debug("Evicted %d oldest event(s) from in-memory log", overflow)
        return event
