from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time as an aware datetime.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().astimezone()


def as_aware(value: datetime) -> datetime:
    """Attach the local zone to naive datetimes; aware values pass through."""
    if value.tzinfo is None:
        return value.astimezone()
    return value


def local_day(value: datetime, tz: Optional[tzinfo] = None) -> date:
    """Calendar day of an instant in `tz` (system local zone when None)."""
    return as_aware(value).astimezone(tz).date()


def day_bounds(day: date, tz: Optional[tzinfo] = None) -> tuple[datetime, datetime]:
    """First and last instant of a local calendar day."""
    start = datetime.combine(day, time.min)
    end = datetime.combine(day, time.max)
    if tz is None:
        return start.astimezone(), end.astimezone()
    return start.replace(tzinfo=tz), end.replace(tzinfo=tz)


def zone_from_name(name: Optional[str]) -> Optional[tzinfo]:
    """IANA zone for a TIMEZONE setting; empty means the system local zone."""
    return ZoneInfo(name) if name else None


def to_utc_naive(value: datetime) -> datetime:
    """Convert an instant to naive UTC for DATETIME columns."""
    return as_aware(value).astimezone(timezone.utc).replace(tzinfo=None)


def from_utc_naive(value: datetime) -> datetime:
    """Read a DATETIME column value (naive UTC) back as an aware instant."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
