from bilancio.application.cache.query_cache import CacheTag, QueryCache, Tag

__all__ = ["CacheTag", "QueryCache", "Tag"]
