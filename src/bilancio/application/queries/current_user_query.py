"""Fetch the logged-in user from the backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio.application.cache import CacheTag

if TYPE_CHECKING:
    from bilancio_auth import UserInfo

    from bilancio.application.cache import QueryCache
    from bilancio.application.context import SessionContext
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort

CURRENT_USER_KEY = ("auth", "user-info")


class CurrentUserQuery:
    """Return fresh user info and refresh the session's copy of it."""

    def __init__(
        self,
        ledger_api: LedgerApiPort,
        cache: QueryCache,
        session: SessionContext,
    ):
        self._api = ledger_api
        self._cache = cache
        self._session = session

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> CurrentUserQuery:
        return cls(
            ledger_api=factory.ledger_api(),
            cache=factory.cache,
            session=factory.session,
        )

    async def execute(self) -> UserInfo:
        self._session.require_user()
        user = await self._cache.get_or_load(
            CURRENT_USER_KEY,
            [CacheTag.AUTH],
            self._api.get_user_info,
        )
        self._session.update_user(user)
        return user
