"""Year / month / category summaries produced by the aggregator.

All summaries are immutable projections of a transaction collection.
They are rebuilt from scratch on every aggregation, never patched.
"""

from __future__ import annotations

from calendar import month_name
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from bilancio.domain.ledger.entities import Transaction
from bilancio.domain.shared.time import month_key


@dataclass(frozen=True)
class CategoryGroup:
    """Transactions of one month sharing the same description."""

    description: str
    transactions: tuple[Transaction, ...]
    total: Decimal

    @property
    def count(self) -> int:
        return len(self.transactions)


@dataclass(frozen=True)
class MonthSummary:
    """Everything that happened in one calendar month.

    ``net`` is earnings minus expenses; withdrawals move money between
    the user's own accounts and are left out of it.
    """

    year: int
    month: int
    earning_groups: tuple[CategoryGroup, ...]
    expense_groups: tuple[CategoryGroup, ...]
    withdrawals: tuple[Transaction, ...]
    total_earnings: Decimal
    total_expenses: Decimal
    total_withdrawals: Decimal
    net: Decimal

    @property
    def transaction_count(self) -> int:
        return (
            sum(g.count for g in self.earning_groups)
            + sum(g.count for g in self.expense_groups)
            + len(self.withdrawals)
        )

    @property
    def period(self) -> str:
        return month_key(self.year, self.month)

    @property
    def label(self) -> str:
        return f"{month_name[self.month]} {self.year}"


@dataclass(frozen=True)
class YearSummary:
    """Months of one year in calendar order plus the year's totals."""

    year: int
    months: tuple[MonthSummary, ...]
    total_earnings: Decimal
    total_expenses: Decimal
    total_withdrawals: Decimal
    net: Decimal

    @property
    def transaction_count(self) -> int:
        return sum(m.transaction_count for m in self.months)

    def month(self, month: int) -> MonthSummary | None:
        for summary in self.months:
            if summary.month == month:
                return summary
        return None


def by_total_desc(groups: Iterable[CategoryGroup]) -> list[CategoryGroup]:
    """Groups ordered by total, largest first (chart and table order)."""
    return sorted(groups, key=lambda g: g.total, reverse=True)
