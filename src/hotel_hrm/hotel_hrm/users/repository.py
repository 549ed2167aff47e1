from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User (the credential store).

    Note (DIP): services depend on this interface, not on a concrete backend.
    Username lookups are case-insensitive.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def add(self, user: User) -> User:
        """Insert and return the user with its newly assigned id."""

        raise NotImplementedError

    def update(self, user: User) -> User:
        raise NotImplementedError

    def delete(self, user_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError
