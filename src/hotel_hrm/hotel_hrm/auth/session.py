"""Session-backed authentication state.

States are ``Anonymous`` and ``Authenticated(claims)``. The claims live in a
per-browser :class:`~.storage.SessionStorage` under a fixed key, which makes
the storage the single source of truth for "who is logged in". Every
transition is published on :data:`auth_state_changed`::

    @auth_state_changed.connect
    def on_change(sender, state):
        ...

Reading never raises: missing, unreadable or malformed claims all mean
``Anonymous``.
"""
from __future__ import annotations

import logging

from blinker import Namespace

from ..core.constants import SESSION_KEY
from ..users.model import User
from .claims import AuthState, Principal, SessionClaims
from .storage import SessionStorage

logger = logging.getLogger(__name__)

_signals = Namespace()

auth_state_changed = _signals.signal("auth-state-changed")


class AuthStateProvider:
    def __init__(self, storage: SessionStorage, *, session_key: str = SESSION_KEY):
        self._storage = storage
        self._session_key = session_key

    def read(self) -> AuthState:
        try:
            result = self._storage.get(self._session_key)
            if not result.success or result.value is None:
                return AuthState.anonymous()
            claims = SessionClaims.from_dict(result.value)
        except Exception:
            logger.warning("Session claims unavailable, treating caller as anonymous", exc_info=True)
            return AuthState.anonymous()
        return AuthState.authenticated(claims)

    def current_principal(self) -> Principal:
        return self.read().principal

    def mark_authenticated(self, user: User) -> AuthState:
        claims = SessionClaims.from_user(user)
        try:
            self._storage.set(self._session_key, claims.to_dict())
            state = AuthState.authenticated(claims)
        except Exception:
            logger.warning("Could not persist session claims for %s", user.username, exc_info=True)
            state = AuthState.anonymous()
        self._notify(state)
        return state

    def mark_logged_out(self) -> AuthState:
        try:
            self._storage.delete(self._session_key)
        except Exception:
            logger.warning("Could not clear session claims", exc_info=True)
        state = AuthState.anonymous()
        self._notify(state)
        return state

    def _notify(self, state: AuthState) -> None:
        auth_state_changed.send(self, state=state)
