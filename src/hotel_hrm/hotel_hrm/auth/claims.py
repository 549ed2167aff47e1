from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.constants import NO_EMPLOYEE_ID
from ..core.enums import Role
from ..users.model import User


@dataclass(frozen=True)
class SessionClaims:
    """What we store into the browser session after login."""

    username: str
    email: str
    role: str
    employee_id: Optional[int] = None

    @classmethod
    def from_user(cls, user: User) -> "SessionClaims":
        return cls(
            username=user.username,
            email=user.email,
            role=user.role.value,
            employee_id=user.employee_id,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SessionClaims":
        """Rebuild claims from storage.

        Raises ``ValueError`` / ``KeyError`` / ``TypeError`` on a malformed payload.
        """
        username = data["username"]
        if not isinstance(username, str) or not username:
            raise ValueError("claims.username must be a non-empty string")
        role = Role(data["role"]).value
        employee_id = data.get("employee_id")
        return cls(
            username=username,
            email=str(data.get("email") or ""),
            role=role,
            employee_id=int(employee_id) if employee_id is not None else None,
        )

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "employee_id": self.employee_id,
        }


@dataclass(frozen=True)
class Principal:
    """Caller identity rebuilt from session claims."""

    name: Optional[str] = None
    role: Optional[Role] = None
    email: Optional[str] = None
    employee_id: int = NO_EMPLOYEE_ID

    @property
    def is_authenticated(self) -> bool:
        return self.name is not None

    @property
    def has_employee(self) -> bool:
        return self.employee_id != NO_EMPLOYEE_ID


ANONYMOUS = Principal()


@dataclass(frozen=True)
class AuthState:
    """Either Anonymous (``claims is None``) or Authenticated(claims)."""

    claims: Optional[SessionClaims] = None

    @classmethod
    def anonymous(cls) -> "AuthState":
        return cls(claims=None)

    @classmethod
    def authenticated(cls, claims: SessionClaims) -> "AuthState":
        return cls(claims=claims)

    @property
    def is_authenticated(self) -> bool:
        return self.claims is not None

    @property
    def principal(self) -> Principal:
        if self.claims is None:
            return ANONYMOUS
        return Principal(
            name=self.claims.username,
            role=Role(self.claims.role),
            email=self.claims.email,
            employee_id=self.claims.employee_id if self.claims.employee_id is not None else NO_EMPLOYEE_ID,
        )
