"""Tests for the read-side queries."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import Mock

import pytest

from bilancio_auth import AuthError, NotAuthenticatedError, UserRole
from bilancio.application.cache import CacheTag
from bilancio.application.ports.ledger_api import TransactionPage
from bilancio.application.queries import (
    AccountOverviewQuery,
    CurrentUserQuery,
    DescriptionTotalsQuery,
    ListDescriptionsQuery,
    ListTotalsQuery,
    ListTransactionsPageQuery,
    ListUsersQuery,
    TransactionsByYearQuery,
    TrendQuery,
)
from bilancio.application.state import TransactionListState
from bilancio.domain.ledger.entities import DescriptionCatalog, Total
from bilancio.domain.ledger.value_objects import OperationType

INCOME = OperationType.INCOME
EXPENSE = OperationType.EXPENSE


@pytest.fixture
def two_years(make_transaction, serve_transactions):
    txns = [
        make_transaction(INCOME, "1000.00", date(2023, 5, 1), "Salary"),
        make_transaction(EXPENSE, "400.00", date(2023, 5, 2), "Rent"),
        make_transaction(INCOME, "1200.00", date(2024, 1, 1), "Salary"),
        make_transaction(EXPENSE, "300.00", date(2024, 1, 3), "Rent"),
        make_transaction(EXPENSE, "50.00", date(2024, 2, 3), "Food"),
    ]
    serve_transactions(txns)
    return txns


class TestTransactionsByYearQuery:
    @pytest.mark.asyncio
    async def test_aggregates_all_pages(self, factory, two_years):
        years = await TransactionsByYearQuery.from_factory(factory).execute()

        assert [y.year for y in years] == [2023, 2024]
        assert years[1].net == Decimal("850.00")
        factory.ledger_api().iter_transactions.assert_called_once_with(2)

    @pytest.mark.asyncio
    async def test_filters_year(self, factory, two_years):
        years = await TransactionsByYearQuery.from_factory(factory).execute(2023)

        assert [y.year for y in years] == [2023]

    @pytest.mark.asyncio
    async def test_cached_until_transactions_invalidated(self, factory, two_years):
        query = TransactionsByYearQuery.from_factory(factory)

        await query.execute()
        await query.execute()
        assert factory.ledger_api().iter_transactions.call_count == 1

        factory.cache.invalidate(CacheTag.TRANSACTIONS)
        await query.execute()
        assert factory.ledger_api().iter_transactions.call_count == 2


class TestReportQueries:
    @pytest.mark.asyncio
    async def test_description_totals_per_year(self, factory, two_years):
        reports = await DescriptionTotalsQuery.from_factory(factory).execute()

        assert [r.year for r in reports] == [2023, 2024]
        expenses_2024 = {d.description: d.total for d in reports[1].expenses}
        assert expenses_2024 == {"Rent": Decimal("300.00"), "Food": Decimal("50.00")}

    @pytest.mark.asyncio
    async def test_description_totals_unknown_year(self, factory, two_years):
        assert await DescriptionTotalsQuery.from_factory(factory).execute(1999) == []

    @pytest.mark.asyncio
    async def test_trend(self, factory, two_years):
        report = await TrendQuery.from_factory(factory).execute()

        assert [p.profit for p in report.points] == [Decimal("600.00"), Decimal("850.00")]
        assert report.best_year.year == 2024

    @pytest.mark.asyncio
    async def test_account_overview(self, factory, mock_api):
        mock_api.get_totals.return_value = [
            Total(id=1, amount=Decimal("750.00"), description="Checking"),
            Total(id=2, amount=Decimal("-250.00"), description="Card"),
        ]

        overview = await AccountOverviewQuery.from_factory(factory).execute()

        assert overview.total_balance == Decimal("500.00")
        assert [s.percentage for s in overview.shares] == [Decimal("75.0"), Decimal("25.0")]


class TestListQueries:
    @pytest.mark.asyncio
    async def test_totals_cached_under_totals_tag(self, factory, mock_api):
        mock_api.get_totals.return_value = []
        query = ListTotalsQuery.from_factory(factory)

        await query.execute()
        await query.execute()
        factory.cache.invalidate(CacheTag.TRANSACTIONS)
        await query.execute()

        mock_api.get_totals.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_descriptions_keyed_by_occurrences(self, factory, mock_api):
        mock_api.get_descriptions.return_value = DescriptionCatalog()
        query = ListDescriptionsQuery.from_factory(factory)

        await query.execute()
        await query.execute(with_occurrences=True)

        assert mock_api.get_descriptions.await_count == 2

    @pytest.mark.asyncio
    async def test_page_query_feeds_state(self, factory, mock_api, make_transaction):
        pages = {
            0: TransactionPage((make_transaction(txn_id=1), make_transaction(txn_id=2)), 3, 0, 2),
            1: TransactionPage((make_transaction(txn_id=3),), 3, 1, 2),
        }
        mock_api.list_transactions.side_effect = lambda index, size: pages[index]
        query = ListTransactionsPageQuery.from_factory(factory)
        state = TransactionListState()

        assert await query.load_next(state) == 2
        assert await query.load_next(state) == 1
        assert await query.load_next(state) == 0

        assert [t.id for t in state.transactions] == [1, 2, 3]
        assert not state.has_more
        assert mock_api.list_transactions.await_count == 2

    @pytest.mark.asyncio
    async def test_empty_page_ends_list(self, factory, mock_api):
        mock_api.list_transactions.return_value = TransactionPage((), 10, 0, 2)
        state = TransactionListState()

        await ListTransactionsPageQuery.from_factory(factory).load_next(state)

        assert not state.has_more


class TestUserQueries:
    @pytest.mark.asyncio
    async def test_current_user_refreshes_session(self, factory, mock_api, user_info):
        fresh = replace(user_info, firstname="Annalisa")
        mock_api.get_user_info.return_value = fresh

        user = await CurrentUserQuery.from_factory(factory).execute()

        assert user == fresh
        assert factory.session.user == fresh

    @pytest.mark.asyncio
    async def test_current_user_requires_login(self, factory, mock_api):
        factory.session.logout()

        with pytest.raises(NotAuthenticatedError):
            await CurrentUserQuery.from_factory(factory).execute()
        mock_api.get_user_info.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_users_requires_admin(self, factory, mock_api):
        with pytest.raises(AuthError, match="admin"):
            await ListUsersQuery.from_factory(factory).execute()
        mock_api.list_users.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_users_as_admin(self, factory, mock_api, user_info):
        factory.session.update_user(replace(user_info, role=UserRole.ADMIN))
        mock_api.list_users.return_value = Mock(total_count=0)

        result = await ListUsersQuery.from_factory(factory).execute(search="ann")

        assert result.total_count == 0
        mock_api.list_users.assert_awaited_once_with(0, 50, "ann")
