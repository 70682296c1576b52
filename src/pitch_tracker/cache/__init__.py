from pitch_tracker.cache.protocol import CacheStore
from pitch_tracker.cache.sqlite_store import SqliteCacheStore

__all__ = ["CacheStore", "SqliteCacheStore"]
