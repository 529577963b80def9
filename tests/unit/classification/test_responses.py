"""Unit tests for the response assembler."""

import json

import pytest

from sentiment_service.classification.exceptions import InternalError
from sentiment_service.classification.responses import (
    encode_response,
    send_ok_response,
    to_response_model,
)
from sentiment_service.models.enums import Sentiment


@pytest.mark.parametrize("sentiment", list(Sentiment))
def test_encode_label(sentiment):
    assert encode_response(sentiment) == f'{{"sentiment":"{sentiment.value}"}}'.encode()


def test_encode_absent_sentiment_as_empty_string():
    assert encode_response(None) == b'{"sentiment":""}'


def test_neutral_round_trip():
    assert json.loads(encode_response(Sentiment.NEUTRAL)) == {"sentiment": "neutral"}


def test_send_ok_response():
    response = send_ok_response(Sentiment.POSITIVE)
    
    assert response.status_code == 200
    assert response.media_type == "application/json"
    assert response.body == b'{"sentiment":"positive"}'


def test_unencodable_value_is_internal_error():
    class NotASentiment:
        value = object()
    
    with pytest.raises(InternalError):
        encode_response(NotASentiment())


def test_to_response_model():
    assert to_response_model(None).sentiment == ""
    assert to_response_model(Sentiment.NEGATIVE).sentiment == "negative"
