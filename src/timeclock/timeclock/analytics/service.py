from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Sequence

from ..sessions.model import WorkSession
from ..sessions.reconstructor import total_hours
from ..time_tracking.service import TimeTrackingService


@dataclass(frozen=True)
class AnalyticsReport:
    total_hours: float
    average_hours: float
    total_days: int
    daily_hours: dict[str, float] = field(default_factory=dict)
    sessions: Sequence[WorkSession] = ()

    def to_json(self) -> dict[str, Any]:
        return {
            "totalHours": self.total_hours,
            "averageHours": self.average_hours,
            "totalDays": self.total_days,
            "dailyHours": dict(self.daily_hours),
            "sessions": [s.to_json() for s in self.sessions],
        }


def summarize(sessions: Sequence[WorkSession]) -> AnalyticsReport:
    """Aggregate sessions for dashboards.

    `total_days` counts sessions, as the dashboard always has, so the
    average is hours per session.
    """
    total = total_hours(sessions)
    daily: dict[str, float] = {}
    for s in sessions:
        daily[s.date] = daily.get(s.date, 0.0) + (s.total_hours or 0.0)

    return AnalyticsReport(
        total_hours=total,
        average_hours=total / len(sessions) if sessions else 0.0,
        total_days=len(sessions),
        daily_hours=dict(sorted(daily.items())),
        sessions=list(sessions),
    )


class AnalyticsService:
    def __init__(self, time_tracking: TimeTrackingService):
        self._time_tracking = time_tracking

    def build(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> AnalyticsReport:
        return summarize(self._time_tracking.get_work_sessions(employee_id, start, end))
