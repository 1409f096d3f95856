"""Report structures derived from the aggregated summaries.

These back the annual accounting table, the yearly trend and the
account overview.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from bilancio.domain.ledger.entities import Total


@dataclass(frozen=True)
class DescriptionTotal:
    """Sum of one description across a whole year."""

    description: str
    total: Decimal


@dataclass(frozen=True)
class DescriptionTotalsReport:
    """Annual accounting: earnings and expenses per description for a year."""

    year: int
    earnings: tuple[DescriptionTotal, ...]
    expenses: tuple[DescriptionTotal, ...]
    total_earnings: Decimal
    total_expenses: Decimal

    @property
    def net(self) -> Decimal:
        return self.total_earnings - self.total_expenses

    def earnings_by_total_desc(self) -> list[DescriptionTotal]:
        return sorted(self.earnings, key=lambda d: d.total, reverse=True)

    def expenses_by_total_desc(self) -> list[DescriptionTotal]:
        return sorted(self.expenses, key=lambda d: d.total, reverse=True)


@dataclass(frozen=True)
class TrendPoint:
    """Income, expenses and profit of a single year."""

    year: int
    income: Decimal
    expenses: Decimal
    profit: Decimal


@dataclass(frozen=True)
class TrendReport:
    """Year-over-year trend with summary statistics.

    Used for:
    - Income/expenses/profit chart per year
    - Average, best and worst year figures
    """

    points: tuple[TrendPoint, ...]
    average_profit: Decimal = Decimal("0")
    best_year: TrendPoint | None = None
    worst_year: TrendPoint | None = None
    average_income: Decimal = Decimal("0")
    max_income: Decimal = Decimal("0")
    min_income: Decimal = Decimal("0")
    average_expenses: Decimal = Decimal("0")
    max_expenses: Decimal = Decimal("0")
    min_expenses: Decimal = Decimal("0")


@dataclass(frozen=True)
class AccountShare:
    """One slice of the account balance chart."""

    total: Total
    absolute_amount: Decimal
    percentage: Decimal  # 0-100 scale


@dataclass(frozen=True)
class AccountOverview:
    """All account balances and their exact sum."""

    totals: tuple[Total, ...]
    total_balance: Decimal
    shares: tuple[AccountShare, ...] = field(default_factory=tuple)
