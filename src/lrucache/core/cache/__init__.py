from .lru import MIN_CAPACITY, LeastRecentlyUsedCache
from .schemas import MISSING, CacheEntry

__all__ = ["LeastRecentlyUsedCache", "CacheEntry", "MISSING", "MIN_CAPACITY"]
