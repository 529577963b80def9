"""
Key-value stores for cached sentiments.

A store is a plain get/set-by-key byte store: no TTL, no transactions, no
namespacing. Backend failures are raised as StoreUnavailableError; what to
do about them is the caller's policy.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog
from redis.asyncio import Redis as AsyncRedis
from redis.exceptions import RedisError

logger = structlog.get_logger(__name__)


class StoreUnavailableError(Exception):
    """
    The backing store could not complete a read or write.
    """
    
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class KeyValueStore(ABC):
    """Abstract byte store keyed by string."""
    
    @abstractmethod
    async def get(self, key: str) -> Optional[bytes]:
        """
        Return the stored value, or None if the key is absent.
        
        Raises:
            StoreUnavailableError: Backend unreachable or errored
        """
    
    @abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        """
        Store a value, overwriting any previous one.
        
        Raises:
            StoreUnavailableError: Backend unreachable or errored
        """
    
    async def ping(self) -> bool:
        """Lightweight reachability check. Never raises."""
        return True
    
    async def close(self) -> None:
        """Release backend resources."""


class RedisKeyValueStore(KeyValueStore):
    """
    Store backed by plain Redis GET/SET.
    
    Single-key GET and SET are atomic in Redis, which is all the cache needs.
    """
    
    def __init__(self, redis_client: AsyncRedis):
        self.redis = redis_client
    
    async def get(self, key: str) -> Optional[bytes]:
        try:
            value = await self.redis.get(key)
        except RedisError as e:
            raise StoreUnavailableError(
                f"Redis GET failed: {e}",
                details={"error_type": type(e).__name__},
            ) from e
        if isinstance(value, str):
            # Clients created with decode_responses=True hand back str
            return value.encode("utf-8")
        return value
    
    async def set(self, key: str, value: bytes) -> None:
        try:
            await self.redis.set(key, value)
        except RedisError as e:
            raise StoreUnavailableError(
                f"Redis SET failed: {e}",
                details={"error_type": type(e).__name__},
            ) from e
    
    async def ping(self) -> bool:
        try:
            return bool(await self.redis.ping())
        except RedisError as e:
            logger.warning("Redis ping failed", error=str(e))
            return False
    
    async def close(self) -> None:
        await self.redis.aclose()


class InMemoryKeyValueStore(KeyValueStore):
    """
    Process-local dict store for development and tests.
    
    Unbounded and never evicted; contents are lost on restart.
    """
    
    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}
    
    async def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)
    
    async def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)
    
    def __len__(self) -> int:
        return len(self._data)
    
    def __contains__(self, key: object) -> bool:
        return key in self._data
