"""Create or change accounts and their balances."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from bilancio.application.cache import CacheTag

if TYPE_CHECKING:
    from bilancio_contracts import TotalUpdateRequest

    from bilancio.application.cache import QueryCache
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort
    from bilancio.domain.ledger.entities import Total

logger = logging.getLogger(__name__)


class UpdateTotalsCommand:
    def __init__(self, ledger_api: LedgerApiPort, cache: QueryCache):
        self._api = ledger_api
        self._cache = cache

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> UpdateTotalsCommand:
        return cls(ledger_api=factory.ledger_api(), cache=factory.cache)

    async def execute(self, totals: Sequence[TotalUpdateRequest]) -> list[Total]:
        updated = await self._api.update_totals(totals)
        self._cache.invalidate(CacheTag.TOTALS)
        logger.info("Updated %d accounts", len(totals))
        return updated
