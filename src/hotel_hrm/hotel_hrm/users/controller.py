from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, make_login_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import User


def user_to_json(u: User) -> dict:
    # Never expose password_hash.
    return {
        "user_id": u.user_id,
        "username": u.username,
        "email": u.email,
        "role": u.role.value,
        "employee_id": u.employee_id,
        "is_active": u.is_active,
    }


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_state)
    service = container.user_service

    @app.route("/api/users", endpoint="list_users")
    @login_required
    def list_users():
        return jsonify({"success": True, "users": [user_to_json(u) for u in service.list_users()]})

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @login_required
    def create_user():
        data = json_body()
        try:
            role = Role(data.get("role", Role.EMPLOYEE.value))
        except ValueError:
            raise ValidationError("Invalid account role")

        employee_id = data.get("employee_id")
        try:
            employee_id = int(employee_id) if employee_id is not None else None
        except (TypeError, ValueError):
            raise ValidationError("employee_id must be an integer")

        user = service.create_account(
            username=str(data.get("username") or ""),
            password=str(data.get("password") or ""),
            email=str(data.get("email") or ""),
            role=role,
            employee_id=employee_id,
        )
        return jsonify({"success": True, "user": user_to_json(user)}), 201

    @app.route("/api/users/<int:user_id>/active", methods=["POST"], endpoint="set_user_active")
    @login_required
    def set_user_active(user_id: int):
        data = json_body()
        if not isinstance(data.get("is_active"), bool):
            raise ValidationError("is_active must be true or false")
        user = service.set_active(user_id, is_active=data["is_active"])
        return jsonify({"success": True, "user": user_to_json(user)})
