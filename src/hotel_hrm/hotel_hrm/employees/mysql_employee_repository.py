from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import EmploymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = (
    "employee_id, first_name, last_name, email, phone_number, department, position, "
    "hire_date, base_salary, status"
)


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row.get("email") or "",
        phone_number=row.get("phone_number") or "",
        department=row.get("department") or "",
        position=row.get("position") or "",
        hire_date=row["hire_date"],
        base_salary=Decimal(str(row["base_salary"])),
        status=EmploymentStatus(row["status"]),
    )


def _params(e: Employee) -> tuple:
    return (
        e.first_name,
        e.last_name,
        e.email,
        e.phone_number,
        e.department,
        e.position,
        e.hire_date,
        e.base_salary,
        e.status.value,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def add(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(first_name, last_name, email, phone_number, department,
                                      position, hire_date, base_salary, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(employee),
            )
            return replace(employee, employee_id=int(cur.lastrowid))

    def update(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET first_name=%s, last_name=%s, email=%s, phone_number=%s, department=%s,
                    position=%s, hire_date=%s, base_salary=%s, status=%s
                WHERE employee_id=%s
                """,
                _params(employee) + (employee.employee_id,),
            )
            return employee

    def delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id")
            return [_to_employee(r) for r in fetchall(cur)]
