"""
Exceptions for the model invocation layer.

Every failure to obtain generated text from the model is an InferenceError.
The pipeline never retries these; the API layer maps them to 5xx responses.
Output that was generated but cannot be interpreted is NOT an InferenceError
(see sentiment_service.classification.exceptions.ParseError).
"""


class InferenceError(Exception):
    """
    Base exception for all model invocation failures.
    
    Catch this to handle any LLM-related failure with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InferenceConnectionError(InferenceError):
    """
    Raised when the inference server cannot be reached.
    
    Includes network errors, refused connections and DNS failures.
    """
    pass


class InferenceTimeoutError(InferenceConnectionError):
    """
    Raised when the model call exceeds its time budget.
    
    Either the HTTP client timed out or the overall inference deadline
    enforced by the classifier expired.
    """
    pass


class InferenceGenerationError(InferenceError):
    """
    Raised when the inference server returns an error during generation.
    
    Examples:
    - GPU out of memory
    - Invalid parameters
    - Malformed response payload
    """
    pass


class ModelNotAvailableError(InferenceGenerationError):
    """
    Raised when the configured model is not installed on the server.
    """
    pass
