"""Export reconstructed work sessions to CSV or XLSX.

Usage: python scripts/export_sessions.py --start 2026-01-01 --end 2026-01-31 [--employee ID] [--xlsx]
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timeclock.timeclock.analytics.export import sessions_to_csv, sessions_to_xlsx
from src.timeclock.timeclock.common.datetime_utils import zone_from_name
from src.timeclock.timeclock.common.http import parse_bound
from src.timeclock.timeclock.container import build_container
from src.timeclock.timeclock.time_tracking.service import TimeTrackingService


def collect_sessions(service: TimeTrackingService, start: str, end: str, employee_id: str | None = None):
    """Sessions between two YYYY-MM-DD days, read in the service zone."""
    lower = parse_bound(start, end_of_day=False, tz=service.tz)
    upper = parse_bound(end, end_of_day=True, tz=service.tz)
    return service.get_work_sessions(employee_id, lower, upper)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--start", required=True, help="YYYY-MM-DD, inclusive")
    parser.add_argument("--end", required=True, help="YYYY-MM-DD, inclusive")
    parser.add_argument("--employee", default=None, help="only this employee id")
    parser.add_argument("--xlsx", action="store_true", help="write an Excel workbook instead of CSV")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    tz = zone_from_name(getattr(settings, "TIMEZONE", None))
    container = build_container(
        db_config=settings.DB_CONFIG,
        pairing=getattr(settings, "PAIRING_STRATEGY", None),
        tz=tz,
    )

    sessions = collect_sessions(container.time_tracking_service, args.start, args.end, args.employee)

    out_dir = REPO_ROOT / "exports"
    out_dir.mkdir(parents=True, exist_ok=True)
    ext = "xlsx" if args.xlsx else "csv"
    out_file = out_dir / f"sessions_{args.start.replace('-', '')}_{args.end.replace('-', '')}.{ext}"
    out_file.write_bytes(sessions_to_xlsx(sessions, tz=tz) if args.xlsx else sessions_to_csv(sessions, tz=tz))
    print(f"OK: {len(sessions)} session(s) written to {out_file}")


if __name__ == "__main__":
    main()
