"""Year -> month -> category aggregation of transactions.

Totals are built bottom-up: group totals from transaction amounts, month
totals from group totals, year totals from month totals. Every figure has
exactly one source, so the levels can never disagree. Summation happens on
``Decimal`` values only.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from bilancio.domain.ledger.entities import Transaction
from bilancio.domain.ledger.value_objects import OperationType
from bilancio.domain.reporting.exceptions import MalformedDateError
from bilancio.domain.reporting.summaries import (
    CategoryGroup,
    MonthSummary,
    YearSummary,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class _MonthBucket:
    """Transactions of one month, partitioned while scanning the input."""

    def __init__(self) -> None:
        # dicts keep first-appearance order of descriptions
        self.earnings: dict[str, list[Transaction]] = {}
        self.expenses: dict[str, list[Transaction]] = {}
        self.withdrawals: list[Transaction] = []

    def add(self, txn: Transaction) -> None:
        if txn.type is OperationType.INCOME:
            self.earnings.setdefault(txn.category, []).append(txn)
        elif txn.type is OperationType.EXPENSE:
            self.expenses.setdefault(txn.category, []).append(txn)
        elif txn.type is OperationType.WITHDRAWAL:
            self.withdrawals.append(txn)
        else:
            msg = f"Transaction '{txn.id}' has unknown type {txn.type!r}"
            raise ValueError(msg)


def aggregate(transactions: Iterable[Transaction]) -> list[YearSummary]:
    """Group transactions by year, month and description with subtotals.

    Input order does not matter for the shape of the result: years and
    months come out ascending. Groups, and transactions inside a group,
    keep the order in which they first appear in the input.

    Raises
    ------
    MalformedDateError
        If a transaction's date cannot be split into year and month.
    """
    buckets: dict[int, dict[int, _MonthBucket]] = defaultdict(dict)
    count = 0

    for txn in transactions:
        year, month = _year_month(txn)
        bucket = buckets[year].get(month)
        if bucket is None:
            bucket = buckets[year][month] = _MonthBucket()
        bucket.add(txn)
        count += 1

    years = [_build_year(year, buckets[year]) for year in sorted(buckets)]
    logger.debug(
        "Aggregated %d transactions into %d years",
        count,
        len(years),
    )
    return years


def _year_month(txn: Transaction) -> tuple[int, int]:
    value = getattr(txn, "date", None)
    year = getattr(value, "year", None)
    month = getattr(value, "month", None)
    if (
        not isinstance(year, int)
        or not isinstance(month, int)
        or isinstance(year, bool)
        or not 1 <= month <= 12
    ):
        raise MalformedDateError(getattr(txn, "id", None), value)
    return year, month


def _build_groups(partition: dict[str, list[Transaction]]) -> tuple[CategoryGroup, ...]:
    return tuple(
        CategoryGroup(
            description=description,
            transactions=tuple(members),
            total=sum((t.amount for t in members), ZERO),
        )
        for description, members in partition.items()
    )


def _build_month(year: int, month: int, bucket: _MonthBucket) -> MonthSummary:
    earning_groups = _build_groups(bucket.earnings)
    expense_groups = _build_groups(bucket.expenses)
    total_earnings = sum((g.total for g in earning_groups), ZERO)
    total_expenses = sum((g.total for g in expense_groups), ZERO)

    return MonthSummary(
        year=year,
        month=month,
        earning_groups=earning_groups,
        expense_groups=expense_groups,
        withdrawals=tuple(bucket.withdrawals),
        total_earnings=total_earnings,
        total_expenses=total_expenses,
        total_withdrawals=sum((t.amount for t in bucket.withdrawals), ZERO),
        net=total_earnings - total_expenses,
    )


def _build_year(year: int, months: dict[int, _MonthBucket]) -> YearSummary:
    summaries = tuple(
        _build_month(year, month, months[month]) for month in sorted(months)
    )
    total_earnings = sum((m.total_earnings for m in summaries), ZERO)
    total_expenses = sum((m.total_expenses for m in summaries), ZERO)

    return YearSummary(
        year=year,
        months=summaries,
        total_earnings=total_earnings,
        total_expenses=total_expenses,
        total_withdrawals=sum((m.total_withdrawals for m in summaries), ZERO),
        net=total_earnings - total_expenses,
    )
