"""Year-over-year income, expenses and profit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio.application.queries.transactions_by_year_query import (
    TransactionsByYearQuery,
)
from bilancio.domain.reporting import TrendReport, build_trend

if TYPE_CHECKING:
    from bilancio.application.factories import ClientFactory


class TrendQuery:
    """Return the trend over every year that has transactions."""

    def __init__(self, transactions_query: TransactionsByYearQuery):
        self._transactions = transactions_query

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> TrendQuery:
        return cls(transactions_query=TransactionsByYearQuery.from_factory(factory))

    async def execute(self) -> TrendReport:
        return build_trend(await self._transactions.execute())
