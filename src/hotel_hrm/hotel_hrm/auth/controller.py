from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_error, make_login_required
from ..container import Container
from .claims import Principal


def principal_to_json(principal: Principal) -> dict:
    return {
        "username": principal.name,
        "email": principal.email,
        "role": principal.role.value if principal.role else None,
        "employee_id": principal.employee_id,
    }


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_state)

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        state = container.auth_service.login(
            str(data.get("username") or ""),
            str(data.get("password") or ""),
        )
        if not state.is_authenticated:
            return json_error("Session storage unavailable, please try again", 503)
        return jsonify({"success": True, "user": principal_to_json(state.principal)})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        return jsonify({"success": True})

    @app.route("/api/auth/me", endpoint="me")
    @login_required
    def me():
        principal = container.auth_state.current_principal()
        return jsonify(
            {
                "success": True,
                "user": principal_to_json(principal),
                "can_modify_employee_data": container.auth_service.can_modify_employee_data(),
                "can_modify_payroll_data": container.auth_service.can_modify_payroll_data(),
            }
        )
