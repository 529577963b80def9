"""
Pipeline exceptions for request decoding, output parsing and response encoding.

- DecodeError: client sent a missing or malformed body (4xx)
- ParseError: model output is not a usable label (never surfaced to clients)
- InternalError: the response could not be encoded (5xx)
"""

from typing import Any


class PipelineError(Exception):
    """
    Base exception for sentiment pipeline errors.
    """
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DecodeError(PipelineError):
    """
    The request body is absent, not JSON, or not {"sentence": <string>}.
    """
    
    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        """
        Args:
            message: Error description
            errors: Structured validation errors (pydantic's errors() output)
        """
        details = {}
        if errors:
            details["errors"] = errors
        super().__init__(message, details)


class ParseError(PipelineError):
    """
    Base class for model output that could not be interpreted.
    """


class UnrecognizedLabelError(ParseError):
    """
    The first line of model output is not exactly one of the canonical labels.
    
    Carries the offending raw text for diagnostics.
    """
    
    def __init__(self, raw_text: str, max_snippet: int = 200):
        self.raw_text = raw_text
        super().__init__(
            "Unrecognized sentiment label",
            {"raw_text": raw_text[:max_snippet]},
        )


class InternalError(PipelineError):
    """
    The pipeline produced a result that could not be serialized.
    """
