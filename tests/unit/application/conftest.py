"""Fixtures for application-layer tests."""

from unittest.mock import AsyncMock, Mock

import pytest

from bilancio.application.cache import QueryCache
from bilancio.application.context import SessionContext
from bilancio.infrastructure.session import InMemorySessionStore


class FakeFactory:
    """ClientFactory over a mocked backend port."""

    def __init__(self, api, session, cache, page_size=2):
        self._api = api
        self.session = session
        self.cache = cache
        self.page_size = page_size

    def ledger_api(self):
        return self._api


def _serve(api, transactions):
    """Make ``api.iter_transactions`` yield ``transactions``."""

    async def _iter(page_size=50):
        for txn in transactions:
            yield txn

    api.iter_transactions = Mock(side_effect=_iter)


@pytest.fixture
def mock_api():
    api = AsyncMock()
    _serve(api, [])
    return api


@pytest.fixture
def serve_transactions(mock_api):
    """Replace the transactions the mocked backend returns."""
    return lambda transactions: _serve(mock_api, transactions)


@pytest.fixture
def session(user_info):
    context = SessionContext(store=InMemorySessionStore())
    context.login_success("tok", user_info)
    return context


@pytest.fixture
def cache():
    return QueryCache()


@pytest.fixture
def factory(mock_api, session, cache):
    return FakeFactory(mock_api, session, cache)
