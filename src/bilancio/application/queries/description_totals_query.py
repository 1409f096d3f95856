"""Annual accounting: totals per description."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio.application.queries.transactions_by_year_query import (
    TransactionsByYearQuery,
)
from bilancio.domain.reporting import (
    DescriptionTotalsReport,
    totals_by_description_all,
)

if TYPE_CHECKING:
    from bilancio.application.factories import ClientFactory


class DescriptionTotalsQuery:
    """Return earnings and expenses summed per description, one report per year.

    With ``year`` the list holds at most that year's report.
    """

    def __init__(self, transactions_query: TransactionsByYearQuery):
        self._transactions = transactions_query

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> DescriptionTotalsQuery:
        return cls(transactions_query=TransactionsByYearQuery.from_factory(factory))

    async def execute(self, year: int | None = None) -> list[DescriptionTotalsReport]:
        return totals_by_description_all(await self._transactions.execute(year))
