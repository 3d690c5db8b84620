from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EventKind


@dataclass(frozen=True)
class ClockEvent:
    """Domain entity: one clock-in or clock-out action.

    Events are append-only; nothing in the system mutates them after creation.
    """

    event_id: str
    employee_id: str
    kind: EventKind
    timestamp: datetime
    location: Optional[str] = None
    notes: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    face_verified: bool = False
