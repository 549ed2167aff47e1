from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..users.model import User
from ..users.repository import UserRepository
from .claims import AuthState
from .hasher import PasswordHasher
from .permissions import can_modify_employee_data, can_modify_payroll_data, is_in_role
from .session import AuthStateProvider

logger = logging.getLogger(__name__)

_DENIED = "Invalid username or password"


class AuthService:
    """Use case: authenticate users and drive the session state.

    Holds no identity of its own; "current user" is always derived from the
    session state.
    """

    def __init__(self, users: UserRepository, hasher: PasswordHasher, auth_state: AuthStateProvider):
        self._users = users
        self._hasher = hasher
        self._auth_state = auth_state

    def authenticate(self, username: str, password: str) -> User:
        user = self._users.get_by_username(username or "")
        if not user or not user.is_active:
            raise AuthenticationError(_DENIED)

        if not self._hasher.verify(password or "", user.password_hash):
            raise AuthenticationError(_DENIED)

        return user

    def login(self, username: str, password: str) -> AuthState:
        try:
            user = self.authenticate(username, password)
        except AuthenticationError:
            logger.info("Login denied for %r", username)
            raise

        state = self._auth_state.mark_authenticated(user)
        if state.is_authenticated:
            logger.info("User %s logged in as %s", user.username, user.role.value)
        return state

    def logout(self) -> AuthState:
        principal = self._auth_state.current_principal()
        state = self._auth_state.mark_logged_out()
        if principal.is_authenticated:
            logger.info("User %s logged out", principal.name)
        return state

    def current_user(self) -> Optional[User]:
        principal = self._auth_state.current_principal()
        if not principal.is_authenticated:
            return None
        user = self._users.get_by_username(principal.name)
        if not user or not user.is_active:
            return None
        return user

    def is_in_role(self, role: Role) -> bool:
        return is_in_role(self._auth_state.current_principal().role, role)

    def can_modify_employee_data(self) -> bool:
        return can_modify_employee_data(self._auth_state.current_principal().role)

    def can_modify_payroll_data(self) -> bool:
        return can_modify_payroll_data(self._auth_state.current_principal().role)
