"""Rename and delete descriptions (categories)."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from bilancio.application.cache import CacheTag
from bilancio.domain.ledger.entities import validate_description

if TYPE_CHECKING:
    from bilancio.application.cache import QueryCache
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort
    from bilancio.domain.ledger.entities import Description

logger = logging.getLogger(__name__)


class UpdateDescriptionCommand:
    """Rename a description.

    Transactions carry the description text, so the transaction lists are
    invalidated as well.
    """

    def __init__(self, ledger_api: LedgerApiPort, cache: QueryCache):
        self._api = ledger_api
        self._cache = cache

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> UpdateDescriptionCommand:
        return cls(ledger_api=factory.ledger_api(), cache=factory.cache)

    async def execute(self, description: Description, new_text: str) -> Description:
        text = validate_description(description.type, new_text)
        updated = await self._api.update_description(
            replace(description, description=text),
        )
        self._cache.invalidate(CacheTag.DESCRIPTIONS, CacheTag.TRANSACTIONS)
        logger.info("Renamed description %d to %r", description.id, text)
        return updated


class DeleteDescriptionCommand:
    def __init__(self, ledger_api: LedgerApiPort, cache: QueryCache):
        self._api = ledger_api
        self._cache = cache

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> DeleteDescriptionCommand:
        return cls(ledger_api=factory.ledger_api(), cache=factory.cache)

    async def execute(self, description_id: int) -> None:
        await self._api.delete_description(description_id)
        self._cache.invalidate(CacheTag.DESCRIPTIONS)
        logger.info("Deleted description %d", description_id)
