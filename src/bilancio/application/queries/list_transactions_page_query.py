"""Paginated transaction list ("load more")."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bilancio.application.cache import CacheTag

if TYPE_CHECKING:
    from bilancio.application.cache import QueryCache
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort
    from bilancio.application.ports.ledger_api import TransactionPage
    from bilancio.application.state import TransactionListState

logger = logging.getLogger(__name__)


class ListTransactionsPageQuery:
    """Fetch one page of transactions, newest first as the backend sorts them.

    ``load_next`` drives a ``TransactionListState``: it fetches the state's
    current page, merges it and advances the page counter.
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
    def from_factory(cls, factory: ClientFactory) -> ListTransactionsPageQuery:
        return cls(
            ledger_api=factory.ledger_api(),
            cache=factory.cache,
            page_size=factory.page_size,
        )

    async def execute(self, page_index: int = 0) -> TransactionPage:
        size = self._page_size
        return await self._cache.get_or_load(
            ("transactions", "page", page_index, size),
            [CacheTag.TRANSACTIONS],
            lambda: self._api.list_transactions(page_index, size),
        )

    async def load_next(self, state: TransactionListState) -> int:
        """Append the next page to ``state``; returns the number of new items."""
        if not state.has_more:
            return 0
        page = await self.execute(state.current_page)
        added = state.add_page(page.transactions, page.total_count)
        if not page.transactions:
            state.has_more = False
        state.increment_page()
        logger.debug(
            "Loaded page %d: %d new, %d of %d",
            page.page_index,
            added,
            len(state.transactions),
            state.total_count,
        )
        return added
