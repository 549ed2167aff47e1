from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, username, password_hash, email, role, employee_id, is_active"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        email=row.get("email") or "",
        role=Role(row["role"]),
        employee_id=int(row["employee_id"]) if row.get("employee_id") is not None else None,
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE LOWER(username)=LOWER(%s)",
                (username,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def add(self, user: User) -> User:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, password_hash, email, role, employee_id, is_active)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (user.username, user.password_hash, user.email, user.role.value, user.employee_id, int(user.is_active)),
            )
            return replace(user, user_id=int(cur.lastrowid))

    def update(self, user: User) -> User:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE users
                SET username=%s, password_hash=%s, email=%s, role=%s, employee_id=%s, is_active=%s
                WHERE user_id=%s
                """,
                (
                    user.username,
                    user.password_hash,
                    user.email,
                    user.role.value,
                    user.employee_id,
                    int(user.is_active),
                    user.user_id,
                ),
            )
            return user

    def delete(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s", (user_id,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY user_id")
            return [_to_user(r) for r in fetchall(cur)]
