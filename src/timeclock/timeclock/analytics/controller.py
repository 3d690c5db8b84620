from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify, request

from ..common.http import parse_range
from ..container import Container
from .export import sessions_to_csv, sessions_to_xlsx

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _filename(prefix: str, start: datetime | None, end: datetime | None, ext: str) -> str:
    parts = [prefix]
    if start:
        parts.append(start.strftime("%Y%m%d"))
    if end:
        parts.append(end.strftime("%Y%m%d"))
    return f"{'_'.join(parts)}.{ext}"


def register(app: Flask, container: Container) -> None:
    def _sessions():
        start, end = parse_range(request.args, container.time_tracking_service.tz)
        sessions = container.time_tracking_service.get_work_sessions(request.args.get("employeeId"), start, end)
        return sessions, start, end

    @app.route("/api/analytics", methods=["GET"], endpoint="analytics")
    def analytics():
        start, end = parse_range(request.args, container.time_tracking_service.tz)
        report = container.analytics_service.build(employee_id=request.args.get("employeeId"), start=start, end=end)
        return jsonify(report.to_json())

    @app.route("/api/sessions.csv", methods=["GET"], endpoint="sessions_csv")
    def sessions_csv():
        sessions, start, end = _sessions()
        return app.response_class(
            sessions_to_csv(sessions, tz=container.time_tracking_service.tz),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={_filename('sessions', start, end, 'csv')}"},
        )

    @app.route("/api/sessions.xlsx", methods=["GET"], endpoint="sessions_xlsx")
    def sessions_xlsx():
        sessions, start, end = _sessions()
        return app.response_class(
            sessions_to_xlsx(sessions, tz=container.time_tracking_service.tz),
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={_filename('sessions', start, end, 'xlsx')}"},
        )
