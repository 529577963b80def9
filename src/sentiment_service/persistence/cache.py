"""
Sentiment cache: memoizes classifications by exact sentence.

Key: the normalized sentence, verbatim. Value: the canonical label as UTF-8
bytes. Entries are written once per sentence and never expire.

Both directions are best-effort. A failed or unreadable lookup is a miss, and
a failed store is logged and dropped, so the cache can never fail a request.
"""

from typing import Optional

import structlog

from sentiment_service.models.enums import Sentiment
from sentiment_service.monitoring.metrics import cache_lookups_total, cache_writes_total
from sentiment_service.persistence.best_effort import best_effort
from sentiment_service.persistence.store import KeyValueStore

logger = structlog.get_logger(__name__)


class SentimentCache:
    """
    Memoization layer over a KeyValueStore.
    
    No locking: the value is a pure function of the key, so concurrent or
    repeated writes for the same sentence are harmless.
    """
    
    def __init__(self, store: KeyValueStore):
        self.kv_store = store
    
    async def lookup(self, sentence: str) -> Optional[Sentiment]:
        """
        Return the cached sentiment for a sentence, or None on any kind of miss.
        
        Args:
            sentence: Normalized sentence (used verbatim as the key)
        """
        raw = await best_effort("cache_read", self.kv_store.get, sentence)
        if raw is None:
            logger.info("Sentence not found in cache")
            cache_lookups_total.labels(result="miss").inc()
            return None
        
        sentiment = self._decode(raw)
        if sentiment is None:
            logger.warning("Ignoring unreadable cache entry", raw_value=raw[:50])
            cache_lookups_total.labels(result="miss").inc()
            return None
        
        logger.info("Found sentence in cache, returning cached sentiment", sentiment=sentiment.value)
        cache_lookups_total.labels(result="hit").inc()
        return sentiment
    
    async def store(self, sentence: str, sentiment: Sentiment) -> bool:
        """
        Cache a recognized sentiment. Never raises.
        
        Returns:
            True if the write reached the store
        """
        stored = await best_effort(
            "cache_write", self._write, sentence, sentiment.value.encode("utf-8")
        )
        if stored:
            logger.info("Cached sentiment", sentiment=sentiment.value)
            cache_writes_total.labels(status="stored").inc()
            return True
        cache_writes_total.labels(status="failed").inc()
        return False
    
    async def _write(self, key: str, value: bytes) -> bool:
        await self.kv_store.set(key, value)
        return True
    
    @staticmethod
    def _decode(raw: bytes) -> Optional[Sentiment]:
        try:
            return Sentiment.try_parse(raw.decode("utf-8"))
        except UnicodeDecodeError:
            return None
