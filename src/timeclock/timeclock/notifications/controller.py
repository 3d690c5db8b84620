from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications/<employee_id>", methods=["GET"], endpoint="notifications")
    def notifications(employee_id: str):
        limit = request.args.get("limit", type=int)
        items = container.notification_service.recent(employee_id, limit=limit)
        return jsonify([n.to_json() for n in items])

    @app.route("/api/notifications/<int:notification_id>/read", methods=["POST"], endpoint="notification_read")
    def notification_read(notification_id: int):
        container.notification_service.mark_read(notification_id)
        return "", 204
