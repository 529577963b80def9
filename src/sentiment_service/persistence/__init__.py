"""
Persistence layer for memoized sentiments.

- store.py: KeyValueStore abstraction with Redis and in-memory backends
- redis_client.py: Process-wide async Redis connection pool
- cache.py: SentimentCache (lookup/store by exact sentence)
- best_effort.py: Swallow-and-log policy for operations that must not fail a request
"""

from sentiment_service.persistence.best_effort import best_effort
from sentiment_service.persistence.cache import SentimentCache
from sentiment_service.persistence.redis_client import RedisClient
from sentiment_service.persistence.store import (
    InMemoryKeyValueStore,
    KeyValueStore,
    RedisKeyValueStore,
    StoreUnavailableError,
)

__all__ = [
    "best_effort",
    "SentimentCache",
    "RedisClient",
    "KeyValueStore",
    "RedisKeyValueStore",
    "InMemoryKeyValueStore",
    "StoreUnavailableError",
]
