"""Process-local session store."""

from __future__ import annotations

from bilancio.application.ports.session_store import StoredSession


class InMemorySessionStore:
    """Keeps the session for the lifetime of the process only."""

    def __init__(self, session: StoredSession | None = None):
        self._session = session

    def load(self) -> StoredSession | None:
        return self._session

    def save(self, session: StoredSession) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None
