"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for LLM clients
- OllamaClient: Implementation for the Ollama inference server
- PromptBuilder: Renders the few-shot sentiment prompt
- exceptions: InferenceError hierarchy
"""

from sentiment_service.llm.base_client import BaseLLMClient
from sentiment_service.llm.ollama_client import OllamaClient
from sentiment_service.llm.prompt_builder import PromptBuilder
from sentiment_service.llm.exceptions import (
    InferenceError,
    InferenceConnectionError,
    InferenceTimeoutError,
    InferenceGenerationError,
    ModelNotAvailableError,
)

__all__ = [
    "BaseLLMClient",
    "OllamaClient",
    "PromptBuilder",
    "InferenceError",
    "InferenceConnectionError",
    "InferenceTimeoutError",
    "InferenceGenerationError",
    "ModelNotAvailableError",
]
