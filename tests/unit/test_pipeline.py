"""Unit tests for the memoized sentiment pipeline."""

from unittest.mock import AsyncMock

import pytest

from sentiment_service.classification.classifier import SentimentClassifier
from sentiment_service.llm.exceptions import InferenceGenerationError
from sentiment_service.models.enums import Sentiment
from sentiment_service.persistence.cache import SentimentCache
from sentiment_service.persistence.store import StoreUnavailableError
from sentiment_service.pipeline import SentimentAnalysisService


@pytest.fixture
def service(memory_store, mock_llm_client, prompt_builder):
    return SentimentAnalysisService(
        cache=SentimentCache(memory_store),
        classifier=SentimentClassifier(mock_llm_client, prompt_builder, inference_timeout=1.0),
    )


@pytest.mark.asyncio
async def test_second_call_is_cache_hit(service, mock_llm_client):
    first = await service.analyze("I am so happy today")
    second = await service.analyze("I am so happy today")
    
    assert first is Sentiment.POSITIVE
    assert second is first
    assert mock_llm_client.generate.await_count == 1


@pytest.mark.asyncio
async def test_miss_routes_to_classifier_and_caches(service, memory_store, mock_llm_client):
    assert await memory_store.get("fresh") is None
    
    assert await service.analyze("fresh") is Sentiment.POSITIVE
    
    mock_llm_client.generate.assert_awaited_once()
    assert await memory_store.get("fresh") == b"positive"


@pytest.mark.asyncio
async def test_prompt_and_cache_key_use_same_sentence(service, memory_store, mock_llm_client):
    await service.analyze("exact text")
    
    request = mock_llm_client.generate.await_args.args[0]
    assert request.prompt.endswith("User: exact text\n")
    assert "exact text" in memory_store


@pytest.mark.asyncio
async def test_cached_value_skips_model(service, memory_store, mock_llm_client):
    await memory_store.set("known", b"negative")
    
    assert await service.analyze("known") is Sentiment.NEGATIVE
    mock_llm_client.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_unrecognized_label_returns_none_and_does_not_cache(
    service, memory_store, mock_llm_client, llm_response
):
    mock_llm_client.generate.return_value = llm_response("Bot: somewhat positive-ish")
    
    assert await service.analyze("meh") is None
    assert len(memory_store) == 0
    
    # Not cached, so the model is asked again
    assert await service.analyze("meh") is None
    assert mock_llm_client.generate.await_count == 2


@pytest.mark.asyncio
async def test_inference_error_propagates_without_cache_write(mock_llm_client, prompt_builder):
    store = AsyncMock()
    store.get = AsyncMock(return_value=None)
    store.set = AsyncMock(return_value=None)
    service = SentimentAnalysisService(
        cache=SentimentCache(store),
        classifier=SentimentClassifier(mock_llm_client, prompt_builder),
    )
    mock_llm_client.generate.side_effect = InferenceGenerationError("GPU out of memory")
    
    with pytest.raises(InferenceGenerationError):
        await service.analyze("x")
    
    store.get.assert_awaited_once_with("x")
    store.set.assert_not_awaited()


@pytest.mark.asyncio
async def test_cache_outage_does_not_fail_request(mock_llm_client, prompt_builder):
    store = AsyncMock()
    store.get = AsyncMock(side_effect=StoreUnavailableError("down"))
    store.set = AsyncMock(side_effect=StoreUnavailableError("down"))
    service = SentimentAnalysisService(
        cache=SentimentCache(store),
        classifier=SentimentClassifier(mock_llm_client, prompt_builder),
    )
    
    assert await service.analyze("x") is Sentiment.POSITIVE
    store.set.assert_awaited_once_with("x", b"positive")
