"""Tag-based cache for query results.

Queries store their results together with the tags they provide;
mutations invalidate tags after a successful write. The next query for an
invalidated key goes back to the backend. This is the whole contract
between the read and the write side, no reactive framework involved.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Hashable, Iterable, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheTag(str, Enum):
    AUTH = "auth"
    TRANSACTIONS = "transactions"
    TOTALS = "totals"
    DESCRIPTIONS = "descriptions"
    USERS = "users"


# A bare tag, or a tag scoped to one entity: (CacheTag.TRANSACTIONS, 42)
Tag = Union[CacheTag, tuple[CacheTag, Hashable]]


class _Entry:
    __slots__ = ("tags", "value")

    def __init__(self, value: Any, tags: frozenset[Tag]):
        self.value = value
        self.tags = tags


class QueryCache:
    """In-memory cache keyed by query key, invalidated by tag."""

    def __init__(self) -> None:
        self._entries: dict[Hashable, _Entry] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Hashable, default: Any = None) -> Any:
        entry = self._entries.get(key)
        return entry.value if entry is not None else default

    def set(self, key: Hashable, value: Any, tags: Iterable[Tag]) -> None:
        self._entries[key] = _Entry(value, frozenset(tags))

    async def get_or_load(
        self,
        key: Hashable,
        tags: Iterable[Tag],
        loader: Callable[[], Awaitable[T]],
    ) -> T:
        """Return the cached value or await ``loader`` and cache its result.

        Loader errors propagate and nothing is cached.
        """
        entry = self._entries.get(key)
        if entry is not None:
            logger.debug("Cache hit: %s", key)
            return entry.value

        logger.debug("Cache miss: %s", key)
        value = await loader()
        self.set(key, value, tags)
        return value

    def invalidate(self, *tags: Tag) -> int:
        """Drop every entry providing one of ``tags``.

        A bare tag also matches entries scoped to that tag; a scoped tag
        matches entries providing the scoped tag or the bare one.
        Returns the number of dropped entries.
        """
        if not tags:
            return 0
        stale = [
            key
            for key, entry in self._entries.items()
            if any(_matches(tag, entry.tags) for tag in tags)
        ]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(
                "Invalidated %d cache entries for tags %s",
                len(stale),
                [_tag_name(t) for t in tags],
            )
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()


def _matches(tag: Tag, provided: frozenset[Tag]) -> bool:
    if tag in provided:
        return True
    if isinstance(tag, CacheTag):
        return any(isinstance(p, tuple) and p[0] is tag for p in provided)
    # scoped invalidation also hits list queries providing the bare tag
    return tag[0] in provided


def _tag_name(tag: Tag) -> str:
    if isinstance(tag, CacheTag):
        return tag.value
    return f"{tag[0].value}:{tag[1]}"
