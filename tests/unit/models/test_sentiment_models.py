"""Unit tests for the request/response wire models."""

import json

import pytest
from pydantic import ValidationError

from sentiment_service.models.sentiment_models import (
    ClassificationRequest,
    ClassificationResponse,
)


def test_request_parses_sentence():
    request = ClassificationRequest.model_validate_json('{"sentence": "I am so happy today"}')
    assert request.sentence == "I am so happy today"


def test_request_keeps_whitespace():
    """Trimming belongs to the normalizer, not the model."""
    request = ClassificationRequest.model_validate_json('{"sentence": "  hi  "}')
    assert request.sentence == "  hi  "


def test_request_ignores_extra_fields():
    request = ClassificationRequest.model_validate_json('{"sentence": "hi", "lang": "en"}')
    assert request.sentence == "hi"


@pytest.mark.parametrize("payload", ['{}', '{"sentence": null}', '{"sentence": 42}', '[]'])
def test_request_rejects_wrong_shape(payload):
    with pytest.raises(ValidationError):
        ClassificationRequest.model_validate_json(payload)


def test_response_round_trip_exact_shape():
    encoded = ClassificationResponse(sentiment="neutral").model_dump_json()
    
    assert encoded == '{"sentiment":"neutral"}'
    assert json.loads(encoded) == {"sentiment": "neutral"}
    assert ClassificationResponse.model_validate_json(encoded).sentiment == "neutral"
