"""
Pydantic data models for the Sentiment Analysis Service.

Includes:
- Sentiment (closed label enum with total try_parse)
- Wire models (ClassificationRequest, ClassificationResponse)
- LLM models (LLMGenerationRequest, LLMGenerationResponse)
"""

from sentiment_service.models.enums import Sentiment
from sentiment_service.models.sentiment_models import (
    ClassificationRequest,
    ClassificationResponse,
)
from sentiment_service.models.llm_models import (
    LLMGenerationRequest,
    LLMGenerationResponse,
)

__all__ = [
    "Sentiment",
    "ClassificationRequest",
    "ClassificationResponse",
    "LLMGenerationRequest",
    "LLMGenerationResponse",
]
