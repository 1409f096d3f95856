"""Persistence port for the client session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from bilancio_auth import UserInfo


@dataclass(frozen=True)
class StoredSession:
    token: str
    user: UserInfo


class SessionStore(Protocol):
    """Keeps the session across process restarts."""

    def load(self) -> StoredSession | None:
        """Return the saved session, or None when nothing usable is stored."""
        ...

    def save(self, session: StoredSession) -> None:
        ...

    def clear(self) -> None:
        ...
