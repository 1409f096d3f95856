"""Overview of account balances for the dashboard."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from bilancio.domain.ledger.entities import Total
from bilancio.domain.reporting.reports import AccountOverview, AccountShare


def account_overview(totals: Iterable[Total]) -> AccountOverview:
    """Sum the signed balances and compute each account's share.

    Shares are based on absolute amounts so an overdrawn account still
    gets a visible slice.
    """
    items = tuple(totals)
    total_balance = sum((t.amount for t in items), Decimal("0"))
    absolute_sum = sum((abs(t.amount) for t in items), Decimal("0"))

    shares = tuple(
        AccountShare(
            total=total,
            absolute_amount=abs(total.amount),
            percentage=(
                (abs(total.amount) / absolute_sum * 100).quantize(Decimal("0.1"))
                if absolute_sum > 0
                else Decimal("0")
            ),
        )
        for total in items
    )
    return AccountOverview(totals=items, total_balance=total_balance, shares=shares)
