"""Per-description totals of a year (annual accounting)."""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from bilancio.domain.reporting.reports import DescriptionTotal, DescriptionTotalsReport
from bilancio.domain.reporting.summaries import CategoryGroup, YearSummary


def totals_by_description(year_summary: YearSummary) -> DescriptionTotalsReport:
    """Sum each description's group totals over all months of the year.

    Descriptions keep the order of their first appearance. The grand
    totals are taken from the year summary itself.
    """
    return DescriptionTotalsReport(
        year=year_summary.year,
        earnings=_sum_groups(
            group for month in year_summary.months for group in month.earning_groups
        ),
        expenses=_sum_groups(
            group for month in year_summary.months for group in month.expense_groups
        ),
        total_earnings=year_summary.total_earnings,
        total_expenses=year_summary.total_expenses,
    )


def totals_by_description_all(
    year_summaries: Iterable[YearSummary],
) -> list[DescriptionTotalsReport]:
    return [totals_by_description(summary) for summary in year_summaries]


def _sum_groups(groups: Iterable[CategoryGroup]) -> tuple[DescriptionTotal, ...]:
    totals: dict[str, Decimal] = defaultdict(Decimal)
    for group in groups:
        totals[group.description] += group.total
    return tuple(
        DescriptionTotal(description=description, total=total)
        for description, total in totals.items()
    )
