from __future__ import annotations

from functools import wraps
from typing import Callable, Optional

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .claims import Principal

RolePredicate = Callable[[Optional[Role]], bool]

_DATA_EDITORS = frozenset({Role.HR, Role.ADMIN})


def can_modify_employee_data(role: Optional[Role]) -> bool:
    return role in _DATA_EDITORS


def can_modify_payroll_data(role: Optional[Role]) -> bool:
    return role in _DATA_EDITORS


def is_in_role(role: Optional[Role], target: Role) -> bool:
    return role is not None and role == target


def is_admin(role: Optional[Role]) -> bool:
    return is_in_role(role, Role.ADMIN)


def can_view_employee_records(principal: Principal, employee_id: int) -> bool:
    """HR/Admin see everyone; other callers only their own linked employee."""
    if principal.role in _DATA_EDITORS:
        return True
    return principal.has_employee and principal.employee_id == int(employee_id)


def requires_permission(predicate: RolePredicate, message: str = "You do not have permission for this action"):
    """Guard a service method with a role predicate.

    The decorated method's instance must expose ``_auth_state`` (an
    ``AuthStateProvider``); the predicate is evaluated against the session
    state at call time, before the method body runs.
    """

    def decorator(method):
        @wraps(method)
        def wrapper(self, *args, **kwargs):
            principal = self._auth_state.current_principal()
            if not principal.is_authenticated or not predicate(principal.role):
                raise AuthorizationError(message)
            return method(self, *args, **kwargs)

        return wrapper

    return decorator
