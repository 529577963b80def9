"""
Wire models for the sentiment-analysis endpoint.

ClassificationRequest is decoded from the inbound JSON payload,
ClassificationResponse is the single-field JSON body returned on success.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ClassificationRequest(BaseModel):
    """Inbound payload: {"sentence": "<text>"}."""
    
    model_config = ConfigDict(extra="ignore", frozen=True)
    
    sentence: StrictStr = Field(
        ...,
        description="Text to classify. May be empty; surrounding whitespace is trimmed downstream.",
        examples=["I am so happy today"],
    )


class ClassificationResponse(BaseModel):
    """Outbound payload: {"sentiment": "positive"|"negative"|"neutral"|""}."""
    
    model_config = ConfigDict(frozen=True)
    
    sentiment: str = Field(
        ...,
        description="Canonical label, or empty string when no label was recognized",
        examples=["positive", "negative", "neutral", ""],
    )
