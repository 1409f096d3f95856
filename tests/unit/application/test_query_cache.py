"""Tests for the tag-based query cache."""

from unittest.mock import AsyncMock

import pytest

from bilancio.application.cache import CacheTag, QueryCache


@pytest.fixture
def cache():
    cache = QueryCache()
    cache.set("transactions", [1, 2], [CacheTag.TRANSACTIONS])
    cache.set(("transaction", 42), "t42", [(CacheTag.TRANSACTIONS, 42)])
    cache.set(("transaction", 43), "t43", [(CacheTag.TRANSACTIONS, 43)])
    cache.set("totals", [10], [CacheTag.TOTALS])
    cache.set("descriptions", {}, [CacheTag.DESCRIPTIONS])
    return cache


class TestGetOrLoad:
    @pytest.mark.asyncio
    async def test_loads_once(self):
        cache = QueryCache()
        loader = AsyncMock(return_value="value")

        first = await cache.get_or_load("key", [CacheTag.TOTALS], loader)
        second = await cache.get_or_load("key", [CacheTag.TOTALS], loader)

        assert first == second == "value"
        loader.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_loader_errors_are_not_cached(self):
        cache = QueryCache()
        loader = AsyncMock(side_effect=[RuntimeError("down"), "value"])

        with pytest.raises(RuntimeError):
            await cache.get_or_load("key", [CacheTag.TOTALS], loader)
        assert "key" not in cache

        assert await cache.get_or_load("key", [CacheTag.TOTALS], loader) == "value"

    @pytest.mark.asyncio
    async def test_reload_after_invalidation(self):
        cache = QueryCache()
        loader = AsyncMock(side_effect=["old", "new"])

        await cache.get_or_load("key", [CacheTag.TOTALS], loader)
        cache.invalidate(CacheTag.TOTALS)

        assert await cache.get_or_load("key", [CacheTag.TOTALS], loader) == "new"


class TestInvalidate:
    def test_drops_exactly_the_tagged_entries(self, cache):
        dropped = cache.invalidate(CacheTag.TOTALS)

        assert dropped == 1
        assert "totals" not in cache
        assert len(cache) == 4

    def test_bare_tag_drops_scoped_entries(self, cache):
        dropped = cache.invalidate(CacheTag.TRANSACTIONS)

        assert dropped == 3
        assert set(cache._entries) == {"totals", "descriptions"}

    def test_scoped_tag_drops_entity_and_lists(self, cache):
        dropped = cache.invalidate((CacheTag.TRANSACTIONS, 42))

        assert dropped == 2
        assert ("transaction", 43) in cache
        assert "transactions" not in cache

    def test_multiple_tags(self, cache):
        cache.invalidate(CacheTag.DESCRIPTIONS, CacheTag.TOTALS)

        assert "descriptions" not in cache
        assert "totals" not in cache
        assert "transactions" in cache

    def test_unused_tag_drops_nothing(self, cache):
        assert cache.invalidate(CacheTag.USERS) == 0
        assert cache.invalidate() == 0
        assert len(cache) == 5

    def test_clear(self, cache):
        cache.clear()

        assert len(cache) == 0
        assert cache.get("totals", "missing") == "missing"
