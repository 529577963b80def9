"""
Response assembler: Optional[Sentiment] -> 200 JSON response.

The empty string for "no recognized label" exists only on the wire; inside
the service absence is always None.
"""

from typing import Optional

from fastapi import Response, status
from pydantic import ValidationError as PydanticValidationError

from sentiment_service.classification.exceptions import InternalError
from sentiment_service.models.enums import Sentiment
from sentiment_service.models.sentiment_models import ClassificationResponse

UNKNOWN_SENTIMENT = ""


def to_response_model(sentiment: Optional[Sentiment]) -> ClassificationResponse:
    """Map a sentiment or its absence onto the wire model."""
    return ClassificationResponse(
        sentiment=sentiment.value if sentiment is not None else UNKNOWN_SENTIMENT
    )


def encode_response(sentiment: Optional[Sentiment]) -> bytes:
    """
    Serialize to compact JSON, e.g. b'{"sentiment":"neutral"}'.
    
    Raises:
        InternalError: Serialization failed
    """
    try:
        return to_response_model(sentiment).model_dump_json().encode("utf-8")
    except (PydanticValidationError, ValueError, TypeError) as e:
        raise InternalError(
            "Failed to encode sentiment response",
            {"error": str(e), "sentiment": repr(sentiment)},
        ) from e


def send_ok_response(sentiment: Optional[Sentiment]) -> Response:
    """Build the 200 application/json response for a classification."""
    return Response(
        content=encode_response(sentiment),
        status_code=status.HTTP_200_OK,
        media_type="application/json",
    )
