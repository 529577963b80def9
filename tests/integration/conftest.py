"""Integration test fixtures (service checks and prerequisites).

Tests needing a real Ollama or Redis are skipped when the service is not
reachable on localhost.
"""

import httpx
import pytest
from redis import Redis


@pytest.fixture(scope="session")
def check_ollama():
    """Skip unless Ollama answers at localhost:11434."""
    try:
        response = httpx.get("http://localhost:11434/api/tags", timeout=5)
        if response.status_code != 200:
            pytest.skip("Ollama not available (non-200 status)")
    except httpx.HTTPError as e:
        pytest.skip(f"Ollama not available: {e}")


@pytest.fixture(scope="session")
def check_redis():
    """Skip unless Redis answers at localhost:6379."""
    try:
        client = Redis.from_url("redis://localhost:6379/15")
        client.ping()
        client.close()
    except Exception as e:
        pytest.skip(f"Redis not available: {e}")


@pytest.fixture
def integration_settings(test_settings):
    """Settings pointing at localhost services (Redis test database 15)."""
    test_settings.OLLAMA_BASE_URL = "http://localhost:11434"
    test_settings.REDIS_URL = "redis://localhost:6379/15"
    test_settings.CACHE_BACKEND = "redis"
    return test_settings
