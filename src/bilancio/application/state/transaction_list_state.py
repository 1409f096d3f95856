"""State of the infinite-scroll transaction list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from bilancio.domain.ledger.entities import Transaction


@dataclass
class TransactionListState:
    """Pages of transactions accumulated while the user scrolls.

    Ids are unique within ``transactions``; pages overlapping after a
    concurrent insert on the backend do not produce duplicates.
    """

    transactions: list[Transaction] = field(default_factory=list)
    total_count: int = 0
    current_page: int = 0
    has_more: bool = True

    def add_page(self, transactions: Iterable[Transaction], total_count: int) -> int:
        """Append unseen transactions; returns how many were added."""
        existing_ids = {t.id for t in self.transactions}
        added = 0
        for txn in transactions:
            if txn.id in existing_ids:
                continue
            existing_ids.add(txn.id)
            self.transactions.append(txn)
            added += 1
        self.total_count = total_count
        self.has_more = len(self.transactions) < total_count
        return added

    def increment_page(self) -> None:
        self.current_page += 1

    def reset(self) -> None:
        self.transactions = []
        self.total_count = 0
        self.current_page = 0
        self.has_more = True

    def remove(self, transaction_id: int) -> None:
        self.transactions = [t for t in self.transactions if t.id != transaction_id]
        self.total_count = max(0, self.total_count - 1)

    def replace(self, transaction: Transaction) -> None:
        for index, existing in enumerate(self.transactions):
            if existing.id == transaction.id:
                self.transactions[index] = transaction
                return
