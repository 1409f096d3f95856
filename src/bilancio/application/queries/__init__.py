"""Read-side use cases backed by the query cache."""

from bilancio.application.queries.account_overview_query import AccountOverviewQuery
from bilancio.application.queries.current_user_query import CurrentUserQuery
from bilancio.application.queries.description_totals_query import (
    DescriptionTotalsQuery,
)
from bilancio.application.queries.list_descriptions_query import (
    ListDescriptionsQuery,
)
from bilancio.application.queries.list_totals_query import ListTotalsQuery
from bilancio.application.queries.list_transactions_page_query import (
    ListTransactionsPageQuery,
)
from bilancio.application.queries.list_users_query import ListUsersQuery
from bilancio.application.queries.transactions_by_year_query import (
    TransactionsByYearQuery,
)
from bilancio.application.queries.trend_query import TrendQuery

__all__ = [
    "AccountOverviewQuery",
    "CurrentUserQuery",
    "DescriptionTotalsQuery",
    "ListDescriptionsQuery",
    "ListTotalsQuery",
    "ListTransactionsPageQuery",
    "ListUsersQuery",
    "TransactionsByYearQuery",
    "TrendQuery",
]
