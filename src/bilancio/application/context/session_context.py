"""Session context for the authenticated user.

Replaces an ambient global auth store: one SessionContext is created per
CLI invocation (or per caller) and passed explicitly to the API client
and to every query and command.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from bilancio_auth import NotAuthenticatedError, TokenService, UserInfo

from bilancio.application.ports.session_store import StoredSession

if TYPE_CHECKING:
    from bilancio.application.ports.session_store import SessionStore

logger = logging.getLogger(__name__)


class SessionContext:
    """Token and user of the current session.

    Lifecycle:
    - ``hydrate`` restores a persisted session on start
    - ``login_success`` stores a fresh token and user
    - ``logout`` clears memory and store and notifies listeners
    """

    def __init__(
        self,
        store: SessionStore | None = None,
        token_service: TokenService | None = None,
    ):
        self._store = store
        self._token_service = token_service or TokenService()
        self._token: str | None = None
        self._user: UserInfo | None = None
        self._logout_listeners: list[Callable[[], None]] = []

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def user(self) -> UserInfo | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None and self._user is not None

    def require_user(self) -> UserInfo:
        if not self.is_authenticated or self._user is None:
            raise NotAuthenticatedError
        return self._user

    def hydrate(self) -> bool:
        """Restore the persisted session.

        Only a stored session with both token and user is restored, and
        only while the token is still valid. An expired session is
        removed from the store.
        """
        if self._store is None:
            return False

        stored = self._store.load()
        if stored is None or not stored.token:
            return False

        if self._token_service.is_expired(stored.token):
            logger.info("Stored session for %s has expired", stored.user.username)
            self._store.clear()
            return False

        self._token = stored.token
        self._user = stored.user
        logger.debug("Session restored for %s", stored.user.username)
        return True

    def login_success(self, token: str, user: UserInfo) -> None:
        self._token = token
        self._user = user
        if self._store is not None:
            self._store.save(StoredSession(token=token, user=user))
        logger.info("Logged in as %s", user.username)

    def update_user(self, user: UserInfo) -> None:
        self._user = user
        if self._store is not None and self._token is not None:
            self._store.save(StoredSession(token=self._token, user=user))

    def logout(self) -> None:
        was_authenticated = self.is_authenticated
        self._token = None
        self._user = None
        if self._store is not None:
            self._store.clear()
        for listener in list(self._logout_listeners):
            listener()
        if was_authenticated:
            logger.info("Logged out")

    def on_logout(self, listener: Callable[[], None]) -> None:
        """Register a callback run on every logout (e.g. cache reset)."""
        self._logout_listeners.append(listener)

    def __repr__(self) -> str:
        user = self._user.username if self._user else None
        return f"SessionContext(user={user!r}, authenticated={self.is_authenticated})"
