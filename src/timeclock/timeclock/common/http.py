from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Any, Mapping, Optional

from flask import request

from ..core.exceptions import ValidationError
from .datetime_utils import as_aware, day_bounds, parse_iso_date


def parse_bound(value: Optional[str], *, end_of_day: bool, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse a `start`/`end` query value.

    A bare YYYY-MM-DD covers the whole local day; anything else must be an
    ISO-8601 datetime, read in `tz` when it carries no offset.
    """
    if not value:
        return None
    try:
        if len(value) == 10:
            start, end = day_bounds(parse_iso_date(value), tz)
            return end if end_of_day else start
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None and tz is not None:
            return parsed.replace(tzinfo=tz)
        return as_aware(parsed)
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc


def parse_range(
    args: Mapping[str, str], tz: Optional[tzinfo] = None
) -> tuple[Optional[datetime], Optional[datetime]]:
    start = parse_bound(args.get("start"), end_of_day=False, tz=tz)
    end = parse_bound(args.get("end"), end_of_day=True, tz=tz)
    if start and end and start > end:
        raise ValidationError("start must not be after end")
    return start, end


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data
