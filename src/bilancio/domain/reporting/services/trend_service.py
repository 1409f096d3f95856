"""Yearly income / expense / profit trend."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from bilancio.domain.reporting.reports import TrendPoint, TrendReport
from bilancio.domain.reporting.summaries import YearSummary

CENT = Decimal("0.01")


def build_trend(year_summaries: Iterable[YearSummary]) -> TrendReport:
    """One point per year, oldest first, plus average/max/min figures."""
    points = tuple(
        TrendPoint(
            year=summary.year,
            income=summary.total_earnings,
            expenses=summary.total_expenses,
            profit=summary.net,
        )
        for summary in sorted(year_summaries, key=lambda s: s.year)
    )
    if not points:
        return TrendReport(points=())

    incomes = [p.income for p in points]
    expenses = [p.expenses for p in points]

    return TrendReport(
        points=points,
        average_profit=_average(p.profit for p in points),
        # max/min keep the first year on ties
        best_year=max(points, key=lambda p: p.profit),
        worst_year=min(points, key=lambda p: p.profit),
        average_income=_average(incomes),
        max_income=max(incomes),
        min_income=min(incomes),
        average_expenses=_average(expenses),
        max_expenses=max(expenses),
        min_expenses=min(expenses),
    )


def _average(values: Iterable[Decimal]) -> Decimal:
    items = list(values)
    if not items:
        return Decimal("0")
    return (sum(items, Decimal("0")) / len(items)).quantize(CENT)
