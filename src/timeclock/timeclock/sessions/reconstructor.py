"""Work-session reconstruction.

Turns an unordered collection of clock events into work sessions:

1. events are validated (the whole call fails on the first malformed record),
2. events outside ``[start, end]`` are dropped,
3. the rest are partitioned by employee and local calendar day,
4. each partition's clock-ins are paired with clock-outs by a
   :class:`PairingStrategy`,
5. sessions are returned most recent first.

The function is pure: it never mutates its input and keeps no state between calls.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import replace
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import as_aware
from ..core.constants import SECONDS_PER_HOUR
from ..core.enums import EventKind
from ..core.exceptions import InvalidClockEventError
from ..time_entries.model import ClockEvent
from .model import WorkSession
from .strategies.base import PairingStrategy
from .strategies.exclusive_strategy import ExclusivePairing

logger = logging.getLogger(__name__)


def _validated(event: ClockEvent) -> ClockEvent:
    employee_id = getattr(event, "employee_id", None)
    if employee_id is None or not str(employee_id).strip():
        raise InvalidClockEventError(f"clock event {getattr(event, 'event_id', None)!r} has no employee id")

    timestamp = getattr(event, "timestamp", None)
    if not isinstance(timestamp, datetime):
        raise InvalidClockEventError(f"clock event {event.event_id!r} has invalid timestamp {timestamp!r}")

    kind = getattr(event, "kind", None)
    try:
        kind = EventKind(kind)
    except ValueError as exc:
        raise InvalidClockEventError(f"clock event {event.event_id!r} has unknown kind {kind!r}") from exc

    return replace(event, employee_id=str(employee_id).strip(), kind=kind, timestamp=as_aware(timestamp))


def _chronological(events: list[ClockEvent]) -> list[ClockEvent]:
    return sorted(events, key=lambda e: (e.timestamp, str(e.event_id)))


def _session_id(employee_id: str, clock_in: datetime) -> str:
    return f"{employee_id}-{int(round(clock_in.timestamp() * 1000))}"


def reconstruct_sessions(
    events: Iterable[ClockEvent],
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
    pairing: Optional[PairingStrategy] = None,
) -> list[WorkSession]:
    """Rebuild work sessions from clock events.

    Args:
        events: clock events in any order, any mix of employees and days.
        start: optional inclusive lower bound applied before grouping.
        end: optional inclusive upper bound applied before grouping.
        tz: zone that defines calendar days (system local zone when None).
        pairing: clock-in/clock-out matching rule, ExclusivePairing by default.

    Raises:
        InvalidClockEventError: when any event lacks an employee id, has a
            missing/invalid timestamp or an unknown kind.
    """
    pairing = pairing or ExclusivePairing()
    valid = [_validated(e) for e in events]

    lower = as_aware(start) if start is not None else None
    upper = as_aware(end) if end is not None else None
    if lower is not None or upper is not None:
        valid = [
            e for e in valid
            if (lower is None or e.timestamp >= lower) and (upper is None or e.timestamp <= upper)
        ]

    partitions: dict[tuple[str, date], list[ClockEvent]] = defaultdict(list)
    for event in valid:
        partitions[(event.employee_id, event.timestamp.astimezone(tz).date())].append(event)

    sessions: list[WorkSession] = []
    for (employee_id, day), day_events in partitions.items():
        ordered = _chronological(day_events)
        clock_ins = [e for e in ordered if e.kind == EventKind.CLOCK_IN]
        clock_outs = [e for e in ordered if e.kind == EventKind.CLOCK_OUT]

        for clock_in, clock_out in zip(clock_ins, pairing.pair(clock_ins, clock_outs)):
            total_hours = None
            if clock_out is not None:
                total_hours = (clock_out.timestamp - clock_in.timestamp).total_seconds() / SECONDS_PER_HOUR
            sessions.append(
                WorkSession(
                    session_id=_session_id(employee_id, clock_in.timestamp),
                    employee_id=employee_id,
                    clock_in=clock_in.timestamp,
                    clock_out=clock_out.timestamp if clock_out is not None else None,
                    total_hours=total_hours,
                    date=day.isoformat(),
                )
            )

        if len(clock_outs) > len(clock_ins):
            logger.debug("%s has %d unmatched clock-out(s) on %s", employee_id, len(clock_outs) - len(clock_ins), day)

    sessions.sort(key=lambda s: s.employee_id)
    sessions.sort(key=lambda s: s.clock_in, reverse=True)
    return sessions


def total_hours(sessions: Iterable[WorkSession]) -> float:
    """Sum of closed sessions' hours; open sessions count as zero."""
    return sum(s.total_hours or 0.0 for s in sessions)
