"""Reporting domain: aggregation of transactions into summaries and reports."""

from bilancio.domain.reporting.exceptions import MalformedDateError
from bilancio.domain.reporting.reports import (
    AccountOverview,
    AccountShare,
    DescriptionTotal,
    DescriptionTotalsReport,
    TrendPoint,
    TrendReport,
)
from bilancio.domain.reporting.services import (
    account_overview,
    aggregate,
    build_trend,
    totals_by_description,
    totals_by_description_all,
)
from bilancio.domain.reporting.summaries import (
    CategoryGroup,
    MonthSummary,
    YearSummary,
    by_total_desc,
)

__all__ = [
    "AccountOverview",
    "AccountShare",
    "CategoryGroup",
    "DescriptionTotal",
    "DescriptionTotalsReport",
    "MalformedDateError",
    "MonthSummary",
    "TrendPoint",
    "TrendReport",
    "YearSummary",
    "account_overview",
    "aggregate",
    "build_trend",
    "by_total_desc",
    "totals_by_description",
    "totals_by_description_all",
]
