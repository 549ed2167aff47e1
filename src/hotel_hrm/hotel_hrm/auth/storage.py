"""Per-browser session storage backends used by the auth state provider."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from flask import session


@dataclass(frozen=True)
class StorageResult:
    success: bool
    value: Optional[Any] = None


class SessionStorage(Protocol):
    """Key/value storage scoped to one browser session.

    Implementations may raise on any call when the storage is unavailable.
    """

    def get(self, key: str) -> StorageResult:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class FlaskSessionStorage(SessionStorage):
    """Backed by Flask's signed cookie session of the current request.

    Outside a request context every call raises ``RuntimeError``.
    """

    def __init__(self, *, permanent: bool = True):
        self._permanent = permanent

    def get(self, key: str) -> StorageResult:
        if key not in session:
            return StorageResult(success=False)
        return StorageResult(success=True, value=session[key])

    def set(self, key: str, value: Any) -> None:
        session.permanent = self._permanent
        session[key] = value

    def delete(self, key: str) -> None:
        session.pop(key, None)


class InMemorySessionStorage(SessionStorage):
    """Single-session storage kept in a dict (scripts, tests)."""

    def __init__(self):
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> StorageResult:
        if key not in self._data:
            return StorageResult(success=False)
        return StorageResult(success=True, value=self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
