"""
LLM-specific data models for the request/response cycle.

These models are internal to the LLM layer and describe the raw exchange
with the inference server. Interpreting the generated text as a sentiment
label is the classifier's job, not the client's.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class LLMGenerationRequest(BaseModel):
    """
    Standardized generation request sent to any LLM client implementation.
    """
    model_config = ConfigDict(frozen=True)
    
    prompt: str = Field(..., description="Complete prompt text")
    model: str = Field(..., description="Model name/identifier (e.g., 'llama2:7b-chat')")
    temperature: float = Field(default=0.1, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=8, ge=1, le=8192, description="Hard cap on generated tokens")


class LLMGenerationResponse(BaseModel):
    """
    Generated text plus metadata for logging and metrics.
    
    The content may be empty or arbitrary prose; no validation happens here.
    """
    model_config = ConfigDict(frozen=True)
    
    content: str = Field(..., description="Generated text, unmodified")
    model_version: str = Field(..., description="Model that actually served the request")
    finish_reason: str = Field(..., description="Why generation stopped: 'stop', 'length', etc.")
    prompt_tokens: Optional[int] = Field(default=None, description="Tokens in prompt")
    completion_tokens: Optional[int] = Field(default=None, description="Tokens in completion")
    latency_ms: int = Field(..., ge=0, description="Generation latency in milliseconds")
    created_at: Optional[str] = Field(default=None, description="ISO timestamp from server")
    raw_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific metadata (for debugging)"
    )
