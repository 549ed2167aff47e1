from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._table: InMemoryTable[User] = InMemoryTable("user_id")

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._table.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        wanted = (username or "").casefold()
        return self._table.first(lambda u: u.username.casefold() == wanted)

    def add(self, user: User) -> User:
        return self._table.insert(user)

    def update(self, user: User) -> User:
        return self._table.overwrite(user)

    def delete(self, user_id: int) -> bool:
        return self._table.remove(user_id)

    def list_all(self) -> Sequence[User]:
        return self._table.all()
