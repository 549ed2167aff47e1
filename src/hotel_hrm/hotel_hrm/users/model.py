from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a login account.

    Plain data object; persistence lives in the repositories.
    """

    user_id: int
    username: str
    password_hash: str
    email: str
    role: Role
    employee_id: Optional[int] = None
    is_active: bool = True
