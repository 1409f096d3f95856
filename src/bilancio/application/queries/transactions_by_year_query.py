"""Fetch every transaction of the user and aggregate it by year and month."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bilancio.application.cache import CacheTag
from bilancio.domain.reporting import YearSummary, aggregate

if TYPE_CHECKING:
    from bilancio.application.cache import QueryCache
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort
    from bilancio.domain.ledger.entities import Transaction

logger = logging.getLogger(__name__)

ALL_TRANSACTIONS_KEY = ("transactions", "all")


class TransactionsByYearQuery:
    """Return the year -> month -> category summaries of all transactions.

    The raw transaction list is cached under the TRANSACTIONS tag; the
    aggregation is recomputed on every call so it always reflects the
    cached list.
    """

    def __init__(
        self,
        ledger_api: LedgerApiPort,
        cache: QueryCache,
        page_size: int = 50,
    ):
        self._api = ledger_api
        self._cache = cache
        self._page_size = page_size

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> TransactionsByYearQuery:
        return cls(
            ledger_api=factory.ledger_api(),
            cache=factory.cache,
            page_size=factory.page_size,
        )

    async def fetch_all(self) -> list[Transaction]:
        return await self._cache.get_or_load(
            ALL_TRANSACTIONS_KEY,
            [CacheTag.TRANSACTIONS],
            self._load_all,
        )

    async def execute(self, year: int | None = None) -> list[YearSummary]:
        years = aggregate(await self.fetch_all())
        if year is None:
            return years
        return [y for y in years if y.year == year]

    async def _load_all(self) -> list[Transaction]:
        transactions = [t async for t in self._api.iter_transactions(self._page_size)]
        logger.debug("Fetched %d transactions", len(transactions))
        return transactions
