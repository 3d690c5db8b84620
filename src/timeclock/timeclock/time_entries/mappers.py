"""Row adapters between the `time_entries` table (snake_case) and ClockEvent."""
from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import from_utc_naive, to_utc_naive
from ..core.enums import EventKind
from ..core.exceptions import InvalidClockEventError
from .model import ClockEvent

COLUMNS = (
    "id",
    "employee_id",
    "type",
    "timestamp",
    "location",
    "latitude",
    "longitude",
    "notes",
    "face_verified",
)


def row_to_event(row: Mapping[str, Any]) -> ClockEvent:
    try:
        kind = EventKind(row["type"])
    except (KeyError, ValueError) as exc:
        raise InvalidClockEventError(f"time entry {row.get('id')!r} has invalid type {row.get('type')!r}") from exc

    timestamp = row.get("timestamp")
    if timestamp is None:
        raise InvalidClockEventError(f"time entry {row.get('id')!r} has no timestamp")

    return ClockEvent(
        event_id=str(row["id"]),
        employee_id=str(row["employee_id"]),
        kind=kind,
        timestamp=from_utc_naive(timestamp),
        location=row.get("location"),
        notes=row.get("notes"),
        latitude=_opt_float(row.get("latitude")),
        longitude=_opt_float(row.get("longitude")),
        face_verified=bool(row.get("face_verified") or False),
    )


def event_to_row(event: ClockEvent) -> dict[str, Any]:
    return {
        "id": event.event_id,
        "employee_id": event.employee_id,
        "type": event.kind.value,
        "timestamp": to_utc_naive(event.timestamp),
        "location": event.location,
        "latitude": event.latitude,
        "longitude": event.longitude,
        "notes": event.notes,
        "face_verified": 1 if event.face_verified else 0,
    }


def event_to_json(event: ClockEvent) -> dict[str, Any]:
    """camelCase shape served to API consumers."""
    return {
        "id": event.event_id,
        "employeeId": event.employee_id,
        "type": event.kind.value,
        "timestamp": event.timestamp.isoformat(),
        "location": event.location,
        "notes": event.notes,
    }


def _opt_float(value: Any):
    return float(value) if value is not None else None
