from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Sequence

from ..auth.permissions import can_modify_employee_data, requires_permission
from ..auth.session import AuthStateProvider
from ..common.validators import require_non_empty, require_non_negative, to_decimal
from ..core.enums import EmploymentStatus
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository

_CANNOT_EDIT = "You do not have permission to modify employee data"


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, auth_state: AuthStateProvider):
        self._employees = employees
        self._auth_state = auth_state

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    @requires_permission(can_modify_employee_data, _CANNOT_EDIT)
    def create_employee(
        self,
        *,
        first_name: str,
        last_name: str,
        hire_date: date,
        base_salary: Any,
        email: str = "",
        phone_number: str = "",
        department: str = "",
        position: str = "",
        status: EmploymentStatus = EmploymentStatus.ACTIVE,
    ) -> Employee:
        employee = Employee(
            employee_id=0,
            first_name=require_non_empty(first_name, "First name"),
            last_name=require_non_empty(last_name, "Last name"),
            email=(email or "").strip(),
            phone_number=(phone_number or "").strip(),
            department=(department or "").strip(),
            position=(position or "").strip(),
            hire_date=hire_date,
            base_salary=require_non_negative(to_decimal(base_salary, "Base salary"), "Base salary"),
            status=status,
        )
        return self._employees.add(employee)

    @requires_permission(can_modify_employee_data, _CANNOT_EDIT)
    def update_employee(self, employee: Employee) -> Employee:
        self.get_employee(employee.employee_id)
        require_non_empty(employee.first_name, "First name")
        require_non_empty(employee.last_name, "Last name")
        require_non_negative(employee.base_salary, "Base salary")
        return self._employees.update(employee)

    @requires_permission(can_modify_employee_data, _CANNOT_EDIT)
    def edit_employee(self, employee_id: int, **changes: Any) -> Employee:
        """Apply field changes to a stored employee; lookup happens after the role check."""
        return self.update_employee(replace(self.get_employee(employee_id), **changes))

    @requires_permission(can_modify_employee_data, _CANNOT_EDIT)
    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
