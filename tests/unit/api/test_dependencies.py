"""
Unit tests for API dependency injection.
"""

import pytest

from sentiment_service.api import dependencies
from sentiment_service.api.dependencies import (
    get_analysis_service,
    get_classifier,
    get_kv_store,
    get_llm_client,
    get_prompt_builder,
    get_sentiment_cache,
    get_settings,
)
from sentiment_service.config import Settings
from sentiment_service.llm.base_client import BaseLLMClient
from sentiment_service.llm.prompt_builder import PromptBuilder
from sentiment_service.persistence.redis_client import RedisClient
from sentiment_service.persistence.store import InMemoryKeyValueStore, RedisKeyValueStore
from sentiment_service.pipeline import SentimentAnalysisService


@pytest.fixture
def clear_caches():
    """Drop cached singletons around a test."""
    for factory in (get_settings, get_llm_client, get_prompt_builder, get_kv_store):
        factory.cache_clear()
    yield
    for factory in (get_settings, get_llm_client, get_prompt_builder, get_kv_store):
        factory.cache_clear()
    RedisClient._async_pool = None


def test_get_settings():
    """Test settings singleton."""
    assert get_settings() is get_settings()
    assert isinstance(get_settings(), Settings)


def test_get_llm_client():
    """Test LLM client singleton."""
    client1 = get_llm_client()
    client2 = get_llm_client()
    
    assert client1 is client2
    assert isinstance(client1, BaseLLMClient)


def test_get_prompt_builder_uses_token_cap():
    builder = get_prompt_builder()
    
    assert builder is get_prompt_builder()
    assert isinstance(builder, PromptBuilder)
    assert builder.max_tokens == get_settings().LLM_MAX_TOKENS


def test_kv_store_memory_backend(clear_caches, test_settings, monkeypatch):
    monkeypatch.setattr(dependencies, "settings", test_settings)
    
    store = get_kv_store()
    
    assert isinstance(store, InMemoryKeyValueStore)
    assert get_kv_store() is store


def test_kv_store_redis_backend(clear_caches, test_settings, monkeypatch):
    test_settings.CACHE_BACKEND = "redis"
    monkeypatch.setattr(dependencies, "settings", test_settings)
    
    assert isinstance(get_kv_store(), RedisKeyValueStore)


def test_analysis_service_wiring(test_settings, mock_llm_client, memory_store):
    """Per-request components wrap the injected singletons."""
    cache = get_sentiment_cache(store=memory_store)
    classifier = get_classifier(
        llm_client=mock_llm_client,
        prompt_builder=PromptBuilder(),
        app_settings=test_settings,
    )
    service = get_analysis_service(cache=cache, classifier=classifier)
    
    assert isinstance(service, SentimentAnalysisService)
    assert service.cache.kv_store is memory_store
    assert service.classifier.llm_client is mock_llm_client
    assert service.classifier.inference_timeout == test_settings.INFERENCE_TIMEOUT
