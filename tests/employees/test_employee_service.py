from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from src.hotel_hrm.hotel_hrm.core.enums import EmploymentStatus, Role
from src.hotel_hrm.hotel_hrm.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.hotel_hrm.hotel_hrm.employees.service import EmployeeService


@pytest.fixture
def service(employees_repo, auth_state) -> EmployeeService:
    return EmployeeService(employees_repo, auth_state)


def _create(service, **overrides):
    fields = dict(
        first_name="Maria",
        last_name="Garcia",
        hire_date=date(2024, 5, 1),
        base_salary="42000",
        department="Spa",
        position="Therapist",
    )
    fields.update(overrides)
    return service.create_employee(**fields)


def test_hr_creates_employee(service, login_as):
    login_as(Role.HR)

    employee = _create(service)

    assert employee.employee_id == 1
    assert employee.full_name == "Maria Garcia"
    assert employee.base_salary == Decimal("42000")
    assert employee.status == EmploymentStatus.ACTIVE
    assert service.get_employee(1) == employee


def test_employee_role_cannot_modify(service, employees_repo, make_employee, login_as):
    existing = make_employee()
    login_as(Role.EMPLOYEE, employee_id=existing.employee_id)
    before = list(employees_repo.list_all())

    with pytest.raises(AuthorizationError):
        _create(service)
    with pytest.raises(AuthorizationError):
        service.update_employee(replace(existing, position="Manager"))
    with pytest.raises(AuthorizationError):
        service.delete_employee(existing.employee_id)
    with pytest.raises(AuthorizationError):
        service.edit_employee(existing.employee_id, position="Manager")
    # unknown ids are refused the same way, not reported as missing
    with pytest.raises(AuthorizationError):
        service.edit_employee(999, position="Manager")

    assert list(employees_repo.list_all()) == before
    # reads stay open
    assert service.get_employee(existing.employee_id) == existing


@pytest.mark.parametrize(
    "overrides",
    [
        {"first_name": "  "},
        {"last_name": ""},
        {"base_salary": "-1"},
        {"base_salary": "lots"},
        {"base_salary": "1e999999999"},
    ],
)
def test_create_validates_input(service, employees_repo, login_as, overrides):
    login_as(Role.ADMIN)

    with pytest.raises(ValidationError):
        _create(service, **overrides)

    assert employees_repo.list_all() == []


def test_update_and_delete(service, make_employee, login_as):
    employee = make_employee()
    login_as(Role.HR)

    updated = service.update_employee(replace(employee, status=EmploymentStatus.ON_LEAVE))
    assert service.get_employee(employee.employee_id).status == EmploymentStatus.ON_LEAVE
    assert updated.status == EmploymentStatus.ON_LEAVE

    service.delete_employee(employee.employee_id)
    with pytest.raises(NotFoundError):
        service.get_employee(employee.employee_id)


def test_update_or_delete_unknown_employee(service, make_employee, login_as):
    ghost = replace(make_employee(), employee_id=77)
    login_as(Role.HR)

    with pytest.raises(NotFoundError):
        service.update_employee(ghost)
    with pytest.raises(NotFoundError):
        service.delete_employee(77)


def test_edit_employee_applies_changes(service, make_employee, login_as):
    employee = make_employee()
    login_as(Role.HR)

    edited = service.edit_employee(employee.employee_id, position="Night Auditor", email="")

    assert edited.position == "Night Auditor"
    assert service.get_employee(employee.employee_id).email == ""
    with pytest.raises(NotFoundError):
        service.edit_employee(999, position="Manager")
