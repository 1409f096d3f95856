"""Account balances with their sum and shares."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio.application.queries.list_totals_query import ListTotalsQuery
from bilancio.domain.reporting import AccountOverview, account_overview

if TYPE_CHECKING:
    from bilancio.application.factories import ClientFactory


class AccountOverviewQuery:
    def __init__(self, totals_query: ListTotalsQuery):
        self._totals = totals_query

    @classmethod
    def from_factory(cls, factory: ClientFactory) -> AccountOverviewQuery:
        return cls(totals_query=ListTotalsQuery.from_factory(factory))

    async def execute(self) -> AccountOverview:
        return account_overview(await self._totals.execute())
