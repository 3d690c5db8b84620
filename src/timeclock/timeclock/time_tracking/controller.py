from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, parse_range
from ..container import Container
from ..core.exceptions import ValidationError
from ..time_entries.mappers import event_to_json


def _opt_float(data: dict, key: str):
    value = data.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{key} must be a number") from exc


def register(app: Flask, container: Container) -> None:
    service = container.time_tracking_service

    @app.route("/api/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in():
        data = json_body()
        event = service.clock_in(
            str(data.get("employeeId") or ""),
            location=data.get("location"),
            latitude=_opt_float(data, "latitude"),
            longitude=_opt_float(data, "longitude"),
            face_verified=bool(data.get("faceVerified", False)),
        )
        return jsonify(event_to_json(event)), 201

    @app.route("/api/clock-out", methods=["POST"], endpoint="clock_out")
    def clock_out():
        data = json_body()
        event = service.clock_out(
            str(data.get("employeeId") or ""),
            location=data.get("location"),
            latitude=_opt_float(data, "latitude"),
            longitude=_opt_float(data, "longitude"),
            notes=data.get("notes"),
            face_verified=bool(data.get("faceVerified", False)),
        )
        return jsonify(event_to_json(event)), 201

    @app.route("/api/status/<employee_id>", methods=["GET"], endpoint="clock_status")
    def clock_status(employee_id: str):
        return jsonify(
            {
                "employeeId": employee_id,
                "status": service.get_current_status(employee_id).value,
                "todayHours": service.get_today_hours(employee_id),
            }
        )

    @app.route("/api/time-entries", methods=["GET"], endpoint="time_entries")
    def time_entries():
        start, end = parse_range(request.args, service.tz)
        events = service.get_time_entries(request.args.get("employeeId"), start, end)
        return jsonify([event_to_json(e) for e in events])

    @app.route("/api/sessions", methods=["GET"], endpoint="work_sessions")
    def work_sessions():
        start, end = parse_range(request.args, service.tz)
        sessions = service.get_work_sessions(request.args.get("employeeId"), start, end)
        return jsonify([s.to_json() for s in sessions])
