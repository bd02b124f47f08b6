from lrucache.core.cache import MIN_CAPACITY, MISSING, CacheEntry, LeastRecentlyUsedCache
from lrucache.core.errors import LRUCacheConfigError, LRUCacheError

__all__ = [
    "LeastRecentlyUsedCache",
    "CacheEntry",
    "MISSING",
    "MIN_CAPACITY",
    "LRUCacheError",
    "LRUCacheConfigError",
]
