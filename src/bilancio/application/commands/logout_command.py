"""End the session."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bilancio.application.cache import QueryCache
    from bilancio.application.context import SessionContext
    from bilancio.application.factories import ClientFactory


class LogoutCommand:
    """Forget token and user and drop every cached query result."""

    def __init__(self, session: SessionContext, cache: QueryCache):
        self._session = session
        self._cache = cache

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> LogoutCommand:
        return cls(session=factory.session, cache=factory.cache)

    def execute(self) -> None:
        self._session.logout()
        self._cache.clear()
