"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest

from sentiment_service.config import Settings
from sentiment_service.llm.prompt_builder import PromptBuilder


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.OLLAMA_BASE_URL = "http://custom:11434"
    """
    return Settings(
        # === Application ===
        APP_NAME="Sentiment Analysis Service (Test)",
        APP_VERSION="0.1.0",
        ENVIRONMENT="development",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        
        # === Ollama ===
        OLLAMA_BASE_URL="http://localhost:11434",
        OLLAMA_MODEL="llama2:7b-chat",
        OLLAMA_TIMEOUT=30,
        LLM_MAX_TOKENS=8,
        LLM_MAX_RETRIES=1,
        INFERENCE_TIMEOUT=5.0,
        
        # === Cache ===
        CACHE_BACKEND="memory",
        REDIS_URL="redis://localhost:6379/0",
        REDIS_MAX_CONNECTIONS=10,
        
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def prompt_builder() -> PromptBuilder:
    """PromptBuilder with the production defaults (8-token cap)."""
    return PromptBuilder(model="llama2:7b-chat", temperature=0.1, max_tokens=8)
