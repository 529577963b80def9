"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without Ollama or Redis.
"""

from unittest.mock import AsyncMock

import pytest

from sentiment_service.models.llm_models import LLMGenerationResponse
from sentiment_service.persistence.store import InMemoryKeyValueStore


def make_llm_response(content: str) -> LLMGenerationResponse:
    """Build an LLMGenerationResponse carrying the given generated text."""
    return LLMGenerationResponse(
        content=content,
        model_version="llama2:7b-chat",
        finish_reason="stop",
        prompt_tokens=120,
        completion_tokens=4,
        latency_ms=350,
        raw_metadata={},
    )


@pytest.fixture
def mock_async_redis():
    """Mock AsyncRedis client for unit tests."""
    mock = AsyncMock()
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=True)
    mock.ping = AsyncMock(return_value=True)
    mock.aclose = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def mock_llm_client():
    """Mock LLM client answering "Bot: positive" to every prompt."""
    mock = AsyncMock()
    mock.generate = AsyncMock(return_value=make_llm_response("Bot: positive\nUser: next"))
    mock.health_check = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    """Empty in-process key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def llm_response():
    """Factory fixture for LLMGenerationResponse.
    
    Usage:
        def test_something(llm_response):
            response = llm_response("Bot: neutral")
    """
    return make_llm_response
