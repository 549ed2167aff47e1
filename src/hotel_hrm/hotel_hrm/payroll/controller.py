from __future__ import annotations

from flask import Flask, jsonify

from ..auth.permissions import can_view_employee_records
from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, make_login_required
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.controller import employee_to_json
from .model import PayrollRecord


def payroll_to_json(r: PayrollRecord) -> dict:
    return {
        "payroll_id": r.payroll_id,
        "employee_id": r.employee_id,
        "employee": employee_to_json(r.employee) if r.employee else None,
        "pay_period_start": r.pay_period_start.isoformat(),
        "pay_period_end": r.pay_period_end.isoformat(),
        "base_salary": str(r.base_salary),
        "bonus": str(r.bonus),
        "deductions": str(r.deductions),
        "gross_pay": str(r.gross_pay),
        "net_pay": str(r.net_pay),
        "processed_date": r.processed_date.isoformat(),
        "status": r.status.value,
    }


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_state)
    service = container.payroll_service

    def _require_visible(employee_id: int) -> None:
        if not can_view_employee_records(container.auth_state.current_principal(), employee_id):
            raise AuthorizationError("You can only view your own payroll records")

    @app.route("/api/payroll", endpoint="list_payroll")
    @login_required
    def list_payroll():
        principal = container.auth_state.current_principal()
        records = [
            r for r in service.list_payroll_records() if can_view_employee_records(principal, r.employee_id)
        ]
        return jsonify({"success": True, "records": [payroll_to_json(r) for r in records]})

    @app.route("/api/payroll/<int:payroll_id>", endpoint="get_payroll")
    @login_required
    def get_payroll(payroll_id: int):
        record = service.get_payroll_record(payroll_id)
        _require_visible(record.employee_id)
        return jsonify({"success": True, "record": payroll_to_json(record)})

    @app.route("/api/employees/<int:employee_id>/payroll", endpoint="employee_payroll")
    @login_required
    def employee_payroll(employee_id: int):
        _require_visible(employee_id)
        records = service.list_payroll_records_for_employee(employee_id)
        return jsonify({"success": True, "records": [payroll_to_json(r) for r in records]})

    @app.route("/api/payroll/process", methods=["POST"], endpoint="process_payroll")
    @login_required
    def process_payroll():
        data = json_body()
        try:
            employee_id = int(data.get("employee_id"))
        except (TypeError, ValueError):
            raise ValidationError("employee_id must be an integer")

        record = service.process_payroll(
            employee_id,
            parse_iso_date(data.get("period_start"), "Period start"),
            parse_iso_date(data.get("period_end"), "Period end"),
            bonus=data.get("bonus", 0),
            deductions=data.get("deductions", 0),
        )
        return jsonify({"success": True, "record": payroll_to_json(record)}), 201
