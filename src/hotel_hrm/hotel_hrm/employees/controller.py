from __future__ import annotations

from flask import Flask, jsonify

from ..auth.permissions import can_view_employee_records
from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, make_login_required
from ..common.validators import to_decimal
from ..container import Container
from ..core.enums import EmploymentStatus
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Employee

_TEXT_FIELDS = ("first_name", "last_name", "email", "phone_number", "department", "position")


def employee_to_json(e: Employee) -> dict:
    return {
        "employee_id": e.employee_id,
        "first_name": e.first_name,
        "last_name": e.last_name,
        "full_name": e.full_name,
        "email": e.email,
        "phone_number": e.phone_number,
        "department": e.department,
        "position": e.position,
        "hire_date": e.hire_date.isoformat(),
        "base_salary": str(e.base_salary),
        "status": e.status.value,
    }


def _text(value) -> str:
    return "" if value is None else str(value)


def _parse_status(value) -> EmploymentStatus:
    try:
        return EmploymentStatus(value)
    except ValueError:
        raise ValidationError(f"Invalid employment status: {value!r}")


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_state)
    service = container.employee_service

    @app.route("/api/employees", endpoint="list_employees")
    @login_required
    def list_employees():
        principal = container.auth_state.current_principal()
        employees = [
            e for e in service.list_employees() if can_view_employee_records(principal, e.employee_id)
        ]
        return jsonify({"success": True, "employees": [employee_to_json(e) for e in employees]})

    @app.route("/api/employees/<int:employee_id>", endpoint="get_employee")
    @login_required
    def get_employee(employee_id: int):
        if not can_view_employee_records(container.auth_state.current_principal(), employee_id):
            raise AuthorizationError("You can only view your own employee record")
        return jsonify({"success": True, "employee": employee_to_json(service.get_employee(employee_id))})

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @login_required
    def create_employee():
        data = json_body()
        employee = service.create_employee(
            first_name=str(data.get("first_name") or ""),
            last_name=str(data.get("last_name") or ""),
            email=str(data.get("email") or ""),
            phone_number=str(data.get("phone_number") or ""),
            department=str(data.get("department") or ""),
            position=str(data.get("position") or ""),
            hire_date=parse_iso_date(data.get("hire_date"), "Hire date"),
            base_salary=data.get("base_salary"),
            status=_parse_status(data.get("status", EmploymentStatus.ACTIVE.value)),
        )
        return jsonify({"success": True, "employee": employee_to_json(employee)}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @login_required
    def update_employee(employee_id: int):
        data = json_body()
        changes = {f: _text(data[f]) for f in _TEXT_FIELDS if f in data}
        if "hire_date" in data:
            changes["hire_date"] = parse_iso_date(data["hire_date"], "Hire date")
        if "base_salary" in data:
            changes["base_salary"] = to_decimal(data["base_salary"], "Base salary")
        if "status" in data:
            changes["status"] = _parse_status(data["status"])

        employee = service.edit_employee(employee_id, **changes)
        return jsonify({"success": True, "employee": employee_to_json(employee)})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: int):
        service.delete_employee(employee_id)
        return jsonify({"success": True})
