from __future__ import annotations

import csv
import io
from datetime import timezone

import pandas as pd

from src.timeclock.timeclock.analytics.export import format_hours, sessions_to_csv, sessions_to_xlsx
from src.timeclock.timeclock.analytics.service import summarize
from src.timeclock.timeclock.core.enums import EventKind
from src.timeclock.timeclock.sessions.reconstructor import reconstruct_sessions

from tests.helpers import TZ, at


def _sessions(make_event):
    events = [
        make_event("A", EventKind.CLOCK_IN, at(2, 8)),
        make_event("A", EventKind.CLOCK_OUT, at(2, 12)),
        make_event("A", EventKind.CLOCK_IN, at(2, 13)),
        make_event("A", EventKind.CLOCK_OUT, at(2, 15)),
        make_event("A", EventKind.CLOCK_IN, at(3, 9)),
    ]
    return reconstruct_sessions(events, tz=TZ)


def test_summarize_totals_and_daily_hours(make_event):
    report = summarize(_sessions(make_event))

    assert report.total_hours == 6.0
    assert report.total_days == 3
    assert report.average_hours == 2.0
    assert report.daily_hours == {"2026-03-02": 6.0, "2026-03-03": 0.0}


def test_summarize_empty():
    report = summarize([])

    assert report.total_hours == 0.0
    assert report.average_hours == 0.0
    assert report.total_days == 0
    assert report.daily_hours == {}


def test_analytics_service_reads_through_time_tracking(container, alice):
    svc = container.time_tracking_service
    svc.clock_in(alice.employee_id, now=at(2, 8))
    svc.clock_out(alice.employee_id, now=at(2, 16, 30))

    report = container.analytics_service.build(employee_id=alice.employee_id)

    assert report.total_hours == 8.5
    assert report.to_json()["dailyHours"] == {"2026-03-02": 8.5}


def test_format_hours():
    assert format_hours(None) == "-"
    assert format_hours(8.5) == "08:30"
    assert format_hours(0.999) == "01:00"


def test_csv_export_has_one_row_per_session(make_event):
    payload = sessions_to_csv(_sessions(make_event)).decode("utf-8-sig")
    lines = payload.strip().splitlines()

    assert lines[0] == "date,employee_id,clock_in,clock_out,total_hours,worked_hours"
    assert len(lines) == 4
    assert lines[1].startswith("2026-03-03,A,")
    assert lines[1].endswith(",-,,-")


def test_xlsx_export_round_trips_through_pandas(make_event):
    payload = sessions_to_xlsx(_sessions(make_event))

    df = pd.read_excel(io.BytesIO(payload), engine="openpyxl")
    assert list(df.columns) == ["date", "employee_id", "clock_in", "clock_out", "total_hours", "worked_hours"]
    assert len(df) == 3
    assert sorted(df["worked_hours"].tolist()) == ["-", "02:00", "04:00"]


def test_csv_export_shows_times_in_the_report_zone(make_event):
    events = [
        make_event("A", EventKind.CLOCK_IN, at(2, 1, 30)),
        make_event("A", EventKind.CLOCK_OUT, at(2, 5, 30)),
    ]
    sessions = reconstruct_sessions(events, tz=TZ)

    rows = list(csv.DictReader(io.StringIO(sessions_to_csv(sessions, tz=TZ).decode("utf-8-sig"))))

    assert rows[0]["date"] == "2026-03-02"
    assert rows[0]["clock_in"] == "01:30:00"
    assert rows[0]["clock_out"] == "05:30:00"

    utc_rows = list(csv.DictReader(io.StringIO(sessions_to_csv(sessions, tz=timezone.utc).decode("utf-8-sig"))))
    assert utc_rows[0]["clock_in"] == "23:30:00"


def test_xlsx_export_shows_times_in_the_report_zone(make_event):
    events = [
        make_event("A", EventKind.CLOCK_IN, at(2, 1, 30)),
        make_event("A", EventKind.CLOCK_OUT, at(2, 5, 30)),
    ]

    payload = sessions_to_xlsx(reconstruct_sessions(events, tz=TZ), tz=TZ)

    df = pd.read_excel(io.BytesIO(payload), engine="openpyxl", dtype=str)
    assert df.loc[0, "clock_in"] == "01:30:00"
    assert df.loc[0, "date"] == "2026-03-02"


def test_csv_endpoint_uses_the_service_zone(client, container, alice):
    svc = container.time_tracking_service
    svc.clock_in(alice.employee_id, now=at(2, 1, 30))
    svc.clock_out(alice.employee_id, now=at(2, 5, 30))

    resp = client.get("/api/sessions.csv", query_string={"start": "2026-03-02", "end": "2026-03-02"})

    rows = list(csv.DictReader(io.StringIO(resp.data.decode("utf-8-sig"))))
    assert [(r["date"], r["clock_in"], r["clock_out"]) for r in rows] == [("2026-03-02", "01:30:00", "05:30:00")]
