"""Fetch the user's descriptions (categories)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio.application.cache import CacheTag

if TYPE_CHECKING:
    from bilancio.application.cache import QueryCache
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort
    from bilancio.domain.ledger.entities import DescriptionCatalog


class ListDescriptionsQuery:
    """Return the description catalog, optionally with usage counts."""

    def __init__(self, ledger_api: LedgerApiPort, cache: QueryCache):
        self._api = ledger_api
        self._cache = cache

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> ListDescriptionsQuery:
        return cls(ledger_api=factory.ledger_api(), cache=factory.cache)

    async def execute(self, with_occurrences: bool = False) -> DescriptionCatalog:
        return await self._cache.get_or_load(
            ("descriptions", with_occurrences),
            [CacheTag.DESCRIPTIONS],
            lambda: self._api.get_descriptions(with_occurrences),
        )
