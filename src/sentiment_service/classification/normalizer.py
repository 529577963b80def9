"""
Request normalizer: raw body bytes -> trimmed sentence.

This is the only place the sentence is trimmed. The returned string is used
unchanged as both the cache key and the prompt input.
"""

from typing import Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from sentiment_service.classification.exceptions import DecodeError
from sentiment_service.models.sentiment_models import ClassificationRequest


logger = structlog.get_logger(__name__)


def decode_request(body: Optional[bytes]) -> ClassificationRequest:
    """
    Decode a raw request body into a ClassificationRequest.
    
    Args:
        body: Raw HTTP body, or None if the request carried none
        
    Returns:
        ClassificationRequest with the sentence exactly as sent
        
    Raises:
        DecodeError: Body is absent/empty, not valid JSON, or has the wrong shape
    """
    if not body:
        raise DecodeError("Request body is empty")
    
    try:
        return ClassificationRequest.model_validate_json(body)
    except PydanticValidationError as e:
        raise DecodeError(
            "Request body is not a valid sentiment request",
            errors=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


def normalize_sentence(request: ClassificationRequest) -> str:
    """Strip leading and trailing whitespace. Empty results are allowed."""
    return request.sentence.strip()


def read_sentence(body: Optional[bytes]) -> str:
    """
    Decode and normalize in one step.
    
    Raises:
        DecodeError: See decode_request
    """
    sentence = normalize_sentence(decode_request(body))
    logger.info("Performing sentiment analysis", sentence=sentence)
    return sentence
