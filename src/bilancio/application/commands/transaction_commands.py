"""Create, edit and delete transactions.

Every successful write invalidates the transaction lists and the account
balances, both of which the backend recomputes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from bilancio.application.cache import CacheTag
from bilancio.domain.ledger.value_objects import TransactionDraft

if TYPE_CHECKING:
    from datetime import date

    from bilancio.application.cache import QueryCache
    from bilancio.application.factories import ClientFactory
    from bilancio.application.ports import LedgerApiPort
    from bilancio.domain.ledger.entities import Transaction
    from bilancio.domain.ledger.value_objects import OperationType
    from bilancio.domain.reporting import CategoryGroup

logger = logging.getLogger(__name__)

MUTATION_TAGS = (CacheTag.TRANSACTIONS, CacheTag.TOTALS)


class _TransactionCommand:
    def __init__(self, ledger_api: LedgerApiPort, cache: QueryCache):
        self._api = ledger_api
        self._cache = cache

    @classmethod
    def from_factory(cls, factory: ClientFactory):
        return cls(ledger_api=factory.ledger_api(), cache=factory.cache)

    def _invalidate(self) -> None:
        self._cache.invalidate(*MUTATION_TAGS)


class CreateTransactionCommand(_TransactionCommand):
    """Validate the form values and add the transaction."""

    async def execute(  # NOQA: PLR0913
        self,
        type: OperationType | str,  # NOQA: A002
        amount: Any,
        date: date,
        account_id: int,
        description: str | None = None,
        additional_notes: str | None = None,
        source_account_id: int | None = None,
    ) -> Transaction:
        draft = TransactionDraft.create(
            type=type,
            amount=amount,
            date=date,
            account_id=account_id,
            description=description,
            additional_notes=additional_notes,
            source_account_id=source_account_id,
        )
        created = await self._api.add_transaction(draft)
        self._invalidate()
        logger.info(
            "Created %s transaction %d (%s)",
            created.type.label.lower(),
            created.id,
            created.amount,
        )
        return created


class UpdateTransactionCommand(_TransactionCommand):
    """Replace a transaction's values with a validated draft."""

    async def execute(
        self,
        transaction_id: int,
        draft: TransactionDraft,
    ) -> Transaction:
        updated = await self._api.update_transaction(transaction_id, draft)
        self._invalidate()
        logger.info("Updated transaction %d", transaction_id)
        return updated


class DeleteTransactionCommand(_TransactionCommand):
    async def execute(self, transaction_id: int) -> None:
        await self._api.delete_transaction(transaction_id)
        self._invalidate()
        logger.info("Deleted transaction %d", transaction_id)


class DeleteTransactionGroupCommand(_TransactionCommand):
    """Delete every transaction of one month's category in a single request."""

    async def execute(self, group: CategoryGroup) -> int:
        if not group.transactions:
            return 0
        await self._api.delete_transactions(group.transactions)
        self._invalidate()
        logger.info(
            "Deleted %d transactions of group %r",
            group.count,
            group.description,
        )
        return group.count
