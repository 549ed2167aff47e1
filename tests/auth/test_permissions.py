from __future__ import annotations

import pytest

from src.hotel_hrm.hotel_hrm.auth.claims import Principal
from src.hotel_hrm.hotel_hrm.auth.permissions import (
    can_modify_employee_data,
    can_modify_payroll_data,
    can_view_employee_records,
    is_in_role,
    requires_permission,
)
from src.hotel_hrm.hotel_hrm.core.enums import Role
from src.hotel_hrm.hotel_hrm.core.exceptions import AuthorizationError


@pytest.mark.parametrize(
    "role, expected",
    [(Role.EMPLOYEE, False), (Role.HR, True), (Role.ADMIN, True), (None, False)],
)
def test_modify_predicates(role, expected):
    assert can_modify_employee_data(role) is expected
    assert can_modify_payroll_data(role) is expected


def test_is_in_role_is_plain_equality():
    assert is_in_role(Role.HR, Role.HR)
    assert not is_in_role(Role.HR, Role.ADMIN)
    assert not is_in_role(None, Role.EMPLOYEE)


def test_can_view_employee_records():
    staff = Principal(name="john", role=Role.EMPLOYEE, email="", employee_id=1)
    unlinked = Principal(name="temp", role=Role.EMPLOYEE, email="")
    hr = Principal(name="hr", role=Role.HR, email="")

    assert can_view_employee_records(staff, 1)
    assert not can_view_employee_records(staff, 2)
    assert not can_view_employee_records(unlinked, 0)
    assert can_view_employee_records(hr, 2)


class _Guarded:
    def __init__(self, auth_state):
        self._auth_state = auth_state
        self.calls = 0

    @requires_permission(can_modify_payroll_data, "nope")
    def mutate(self, value):
        self.calls += 1
        return value * 2


def test_requires_permission_checks_session_at_call_time(auth_state, login_as):
    guarded = _Guarded(auth_state)

    with pytest.raises(AuthorizationError):
        guarded.mutate(1)

    login_as(Role.ADMIN)
    assert guarded.mutate(2) == 4

    login_as(Role.EMPLOYEE, employee_id=1)
    with pytest.raises(AuthorizationError, match="nope"):
        guarded.mutate(3)

    assert guarded.calls == 1
