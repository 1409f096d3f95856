"""Fetch the account balances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio.application.cache import CacheTag

if TYPE_CHECKING:
    from bilancio.application.cache import QueryCache
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort
    from bilancio.domain.ledger.entities import Total

TOTALS_KEY = ("totals",)


class ListTotalsQuery:
    """Return all accounts ("totals") of the user."""

    def __init__(self, ledger_api: LedgerApiPort, cache: QueryCache):
        self._api = ledger_api
        self._cache = cache

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> ListTotalsQuery:
        return cls(ledger_api=factory.ledger_api(), cache=factory.cache)

    async def execute(self) -> list[Total]:
        return await self._cache.get_or_load(
            TOTALS_KEY,
            [CacheTag.TOTALS],
            self._api.get_totals,
        )
