"""Pure reporting services over transactions and summaries."""

from bilancio.domain.reporting.services.account_overview_service import (
    account_overview,
)
from bilancio.domain.reporting.services.description_totals_service import (
    totals_by_description,
    totals_by_description_all,
)
from bilancio.domain.reporting.services.transaction_aggregation_service import (
    aggregate,
)
from bilancio.domain.reporting.services.trend_service import build_trend

__all__ = [
    "account_overview",
    "aggregate",
    "build_trend",
    "totals_by_description",
    "totals_by_description_all",
]
