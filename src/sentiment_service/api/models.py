"""
API-specific response models for the service endpoints.

The sentiment endpoint itself uses the wire models in
sentiment_service.models.sentiment_models.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(
        description="Overall health status",
        examples=["healthy", "degraded"]
    )
    version: str = Field(
        description="Service version",
        examples=["0.1.0"]
    )
    services: dict[str, str] = Field(
        description="Collaborator health status",
        examples=[{"ollama": "ok", "cache": "ok"}]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp (UTC)"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    error: str = Field(
        description="Error code",
        examples=["invalid_request", "inference_failed", "inference_timeout", "internal_error"]
    )
    message: str = Field(
        description="Human-readable error message"
    )
    details: Optional[dict] = Field(
        default=None,
        description="Additional error details (e.g., body validation errors)"
    )
    timestamp: datetime = Field(
        description="Error timestamp (UTC)"
    )
