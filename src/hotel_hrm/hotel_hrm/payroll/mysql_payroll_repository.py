from __future__ import annotations

import json
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import EmploymentStatus, PayrollStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..employees.model import Employee
from .model import PayrollRecord
from .repository import PayrollRepository

_COLUMNS = (
    "payroll_id, employee_id, employee_snapshot, pay_period_start, pay_period_end, "
    "base_salary, bonus, deductions, gross_pay, net_pay, processed_date, status"
)


def _snapshot_to_json(employee: Optional[Employee]) -> Optional[str]:
    if employee is None:
        return None
    return json.dumps(
        {
            "employee_id": employee.employee_id,
            "first_name": employee.first_name,
            "last_name": employee.last_name,
            "email": employee.email,
            "phone_number": employee.phone_number,
            "department": employee.department,
            "position": employee.position,
            "hire_date": employee.hire_date.isoformat(),
            "base_salary": str(employee.base_salary),
            "status": employee.status.value,
        }
    )


def _snapshot_from_json(raw) -> Optional[Employee]:
    if not raw:
        return None
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    data = json.loads(raw) if isinstance(raw, str) else raw
    return Employee(
        employee_id=int(data["employee_id"]),
        first_name=data["first_name"],
        last_name=data["last_name"],
        email=data.get("email", ""),
        phone_number=data.get("phone_number", ""),
        department=data.get("department", ""),
        position=data.get("position", ""),
        hire_date=date.fromisoformat(data["hire_date"]),
        base_salary=Decimal(data["base_salary"]),
        status=EmploymentStatus(data["status"]),
    )


def _to_record(row: dict) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=int(row["payroll_id"]),
        employee_id=int(row["employee_id"]),
        employee=_snapshot_from_json(row.get("employee_snapshot")),
        pay_period_start=row["pay_period_start"],
        pay_period_end=row["pay_period_end"],
        base_salary=Decimal(str(row["base_salary"])),
        bonus=Decimal(str(row["bonus"])),
        deductions=Decimal(str(row["deductions"])),
        gross_pay=Decimal(str(row["gross_pay"])),
        net_pay=Decimal(str(row["net_pay"])),
        processed_date=row["processed_date"],
        status=PayrollStatus(row["status"]),
    )


def _params(r: PayrollRecord) -> tuple:
    return (
        r.employee_id,
        _snapshot_to_json(r.employee),
        r.pay_period_start,
        r.pay_period_end,
        r.base_salary,
        r.bonus,
        r.deductions,
        r.gross_pay,
        r.net_pay,
        r.processed_date,
        r.status.value,
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_records WHERE payroll_id=%s", (payroll_id,))
            row = fetchone(cur)
            return _to_record(row) if row else None

    def list_by_employee_id(self, employee_id: int) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payroll_records WHERE employee_id=%s ORDER BY payroll_id",
                (employee_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def add(self, record: PayrollRecord) -> PayrollRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_records(employee_id, employee_snapshot, pay_period_start, pay_period_end,
                                            base_salary, bonus, deductions, gross_pay, net_pay,
                                            processed_date, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(record),
            )
            return replace(record, payroll_id=int(cur.lastrowid))

    def update(self, record: PayrollRecord) -> PayrollRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payroll_records
                SET employee_id=%s, employee_snapshot=%s, pay_period_start=%s, pay_period_end=%s,
                    base_salary=%s, bonus=%s, deductions=%s, gross_pay=%s, net_pay=%s,
                    processed_date=%s, status=%s
                WHERE payroll_id=%s
                """,
                _params(record) + (record.payroll_id,),
            )
            return record

    def list_all(self) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_records ORDER BY payroll_id")
            return [_to_record(r) for r in fetchall(cur)]
