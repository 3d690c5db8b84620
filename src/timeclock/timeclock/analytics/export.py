"""CSV / Excel exports of work sessions.

Formatting for display happens here; the reconstructor hands over raw
datetimes and float hours.
"""
from __future__ import annotations

import csv
import io
from datetime import tzinfo
from typing import Optional, Sequence

import pandas as pd

from ..sessions.model import WorkSession

FIELDNAMES = ["date", "employee_id", "clock_in", "clock_out", "total_hours", "worked_hours"]


def format_hours(hours: float | None) -> str:
    """Hours as HH:MM, '-' for an open session."""
    if hours is None:
        return "-"
    minutes = int(round(hours * 60))
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _rows(sessions: Sequence[WorkSession], tz: Optional[tzinfo] = None) -> list[dict]:
    return [
        {
            "date": s.date,
            "employee_id": s.employee_id,
            "clock_in": s.clock_in.astimezone(tz).strftime("%H:%M:%S"),
            "clock_out": s.clock_out.astimezone(tz).strftime("%H:%M:%S") if s.clock_out else "-",
            "total_hours": round(s.total_hours, 2) if s.total_hours is not None else "",
            "worked_hours": format_hours(s.total_hours),
        }
        for s in sessions
    ]


def sessions_to_csv(sessions: Sequence[WorkSession], *, tz: Optional[tzinfo] = None) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=FIELDNAMES)
    writer.writeheader()
    for row in _rows(sessions, tz):
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")


def sessions_to_xlsx(
    sessions: Sequence[WorkSession], *, sheet_name: str = "Sessions", tz: Optional[tzinfo] = None
) -> bytes:
    df = pd.DataFrame(_rows(sessions, tz), columns=FIELDNAMES)
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
