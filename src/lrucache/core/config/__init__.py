from .loader import CacheSettings, LoggingConfig, LRUCacheConfig, build_cache, load_config

__all__ = ["CacheSettings", "LoggingConfig", "LRUCacheConfig", "build_cache", "load_config"]
