from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .mappers import employee_to_json

# camelCase request keys -> service keyword arguments
_FIELDS = {
    "name": "name",
    "email": "email",
    "role": "role",
    "department": "department",
    "position": "position",
    "avatar": "avatar_url",
    "faceEncoding": "face_encoding",
}


def _changes(data: dict) -> dict:
    return {attr: data[key] for key, attr in _FIELDS.items() if key in data}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([employee_to_json(e) for e in container.employee_service.list_active()])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        data = _changes(json_body())
        employee = container.employee_service.create(
            name=data.get("name", ""),
            email=data.get("email", ""),
            role=data.get("role") or "employee",
            department=data.get("department", ""),
            position=data.get("position", ""),
            avatar_url=data.get("avatar_url"),
            face_encoding=data.get("face_encoding"),
        )
        return jsonify(employee_to_json(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return jsonify(employee_to_json(container.employee_service.get(employee_id)))

    @app.route("/api/employees/<employee_id>", methods=["PATCH"], endpoint="update_employee")
    def update_employee(employee_id: str):
        employee = container.employee_service.update(employee_id, **_changes(json_body()))
        return jsonify(employee_to_json(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        container.employee_service.deactivate(employee_id)
        return "", 204
