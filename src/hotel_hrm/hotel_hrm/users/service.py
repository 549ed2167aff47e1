from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..auth.hasher import PasswordHasher
from ..auth.permissions import is_admin, requires_permission
from ..auth.session import AuthStateProvider
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

_ADMIN_ONLY = "Only administrators can manage accounts"


class UserService:
    """Use case: manage login accounts (admin)."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher, auth_state: AuthStateProvider):
        self._users = users
        self._hasher = hasher
        self._auth_state = auth_state

    @requires_permission(is_admin, _ADMIN_ONLY)
    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    @requires_permission(is_admin, _ADMIN_ONLY)
    def create_account(
        self,
        *,
        username: str,
        password: str,
        email: str,
        role: Role,
        employee_id: Optional[int] = None,
    ) -> User:
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user = self._users.add(
            User(
                user_id=0,
                username=username,
                password_hash=self._hasher.hash(password),
                email=(email or "").strip(),
                role=role,
                employee_id=int(employee_id) if employee_id is not None else None,
            )
        )
        logger.info("Account %s created with role %s", user.username, user.role.value)
        return user

    @requires_permission(is_admin, _ADMIN_ONLY)
    def set_active(self, user_id: int, *, is_active: bool) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return self._users.update(replace(user, is_active=bool(is_active)))
