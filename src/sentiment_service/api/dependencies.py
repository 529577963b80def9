"""
FastAPI dependency injection for the Sentiment Analysis Service.

Long-lived resources (LLM client, prompt builder, key-value store) are
process-wide singletons; the cache, classifier and pipeline wrapping them
are cheap and built per request.
"""

from functools import lru_cache

import structlog
from fastapi import Depends

from sentiment_service.classification.classifier import SentimentClassifier
from sentiment_service.config import Settings, settings
from sentiment_service.llm.base_client import BaseLLMClient
from sentiment_service.llm.ollama_client import OllamaClient
from sentiment_service.llm.prompt_builder import PromptBuilder
from sentiment_service.persistence.cache import SentimentCache
from sentiment_service.persistence.redis_client import RedisClient
from sentiment_service.persistence.store import (
    InMemoryKeyValueStore,
    KeyValueStore,
    RedisKeyValueStore,
)
from sentiment_service.pipeline import SentimentAnalysisService

logger = structlog.get_logger(__name__)


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    """
    return settings


@lru_cache()
def get_llm_client() -> BaseLLMClient:
    """
    Get singleton LLM client with connection pooling.
    
    Returns:
        OllamaClient instance
    """
    app_settings = get_settings()
    return OllamaClient(
        base_url=app_settings.OLLAMA_BASE_URL,
        timeout=app_settings.OLLAMA_TIMEOUT,
        max_retries=app_settings.LLM_MAX_RETRIES,
    )


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """
    Get singleton prompt builder (template compiled once).
    """
    app_settings = get_settings()
    return PromptBuilder(
        model=app_settings.OLLAMA_MODEL,
        temperature=app_settings.LLM_TEMPERATURE,
        max_tokens=app_settings.LLM_MAX_TOKENS,
    )


@lru_cache()
def get_kv_store() -> KeyValueStore:
    """
    Get the process-wide key-value store selected by CACHE_BACKEND.
    
    Returns:
        RedisKeyValueStore on the shared pool, or an InMemoryKeyValueStore
    """
    app_settings = get_settings()
    if app_settings.CACHE_BACKEND == "memory":
        logger.info("Using in-memory sentiment cache")
        return InMemoryKeyValueStore()
    logger.info("Using Redis sentiment cache", redis_url=app_settings.REDIS_URL)
    return RedisKeyValueStore(RedisClient.get_async_client(app_settings))


def get_sentiment_cache(
    store: KeyValueStore = Depends(get_kv_store),
) -> SentimentCache:
    return SentimentCache(store)


def get_classifier(
    llm_client: BaseLLMClient = Depends(get_llm_client),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
    app_settings: Settings = Depends(get_settings),
) -> SentimentClassifier:
    """
    Create the classifier around the singleton client and prompt builder.
    """
    return SentimentClassifier(
        llm_client=llm_client,
        prompt_builder=prompt_builder,
        inference_timeout=app_settings.INFERENCE_TIMEOUT,
    )


def get_analysis_service(
    cache: SentimentCache = Depends(get_sentiment_cache),
    classifier: SentimentClassifier = Depends(get_classifier),
) -> SentimentAnalysisService:
    """
    Create the request pipeline with injected cache and classifier.
    """
    return SentimentAnalysisService(cache=cache, classifier=classifier)
