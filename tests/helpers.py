from __future__ import annotations

from datetime import datetime, timedelta, timezone

# Fixed offset zone so calendar days do not depend on the machine running the tests
TZ = timezone(timedelta(hours=2))


def at(day: int, hour: int, minute: int = 0, *, month: int = 3) -> datetime:
    return datetime(2026, month, day, hour, minute, tzinfo=TZ)
