"""Admin user listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio_auth import AuthError

from bilancio.application.cache import CacheTag

if TYPE_CHECKING:
    from bilancio_contracts import GetUsersResponse

    from bilancio.application.cache import QueryCache
    from bilancio.application.context import SessionContext
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort


class ListUsersQuery:
    """Return one page of registered users. Admins only."""

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
    def from_factory(cls, factory: ClientFactory) -> ListUsersQuery:
        return cls(
            ledger_api=factory.ledger_api(),
            cache=factory.cache,
            session=factory.session,
        )

    async def execute(
        self,
        page_index: int = 0,
        page_size: int = 50,
        search: str = "",
    ) -> GetUsersResponse:
        if not self._session.require_user().is_admin:
            msg = "Listing users requires an admin role"
            raise AuthError(msg)
        return await self._cache.get_or_load(
            ("users", page_index, page_size, search),
            [CacheTag.USERS],
            lambda: self._api.list_users(page_index, page_size, search),
        )
