"""
Sentiment analysis request pipeline.

    sentence -> cache lookup --hit--> sentiment
                    |
                   miss
                    v
               classifier --label--> cache store (best-effort) --> sentiment
                    |
                    +--unrecognized--> None (nothing cached)

InferenceError from the classifier propagates; every other failure degrades
to a successful result.
"""

from typing import Optional

import structlog

from sentiment_service.classification.classifier import SentimentClassifier
from sentiment_service.classification.exceptions import ParseError
from sentiment_service.models.enums import Sentiment
from sentiment_service.monitoring.metrics import classifications_total
from sentiment_service.persistence.cache import SentimentCache

logger = structlog.get_logger(__name__)


class SentimentAnalysisService:
    """Memoized sentiment classification for normalized sentences."""
    
    def __init__(self, cache: SentimentCache, classifier: SentimentClassifier):
        self.cache = cache
        self.classifier = classifier
    
    async def analyze(self, sentence: str) -> Optional[Sentiment]:
        """
        Return the sentiment of a sentence, consulting the cache first.
        
        Args:
            sentence: Sentence already trimmed by the request normalizer. It is
                used unchanged as both cache key and prompt input.
        
        Returns:
            Sentiment, or None when the model answered with an unrecognized label
        
        Raises:
            InferenceError: Model invocation failed (not retried)
        """
        cached = await self.cache.lookup(sentence)
        if cached is not None:
            return cached
        
        try:
            sentiment = await self.classifier.classify(sentence)
        except ParseError as e:
            logger.warning("Model output not recognized as a sentiment", details=e.details)
            classifications_total.labels(sentiment="unrecognized").inc()
            return None
        
        classifications_total.labels(sentiment=sentiment.value).inc()
        await self.cache.store(sentence, sentiment)
        return sentiment
