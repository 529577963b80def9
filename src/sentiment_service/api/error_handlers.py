"""
FastAPI exception handlers for structured error responses.

Maps pipeline and inference exceptions to HTTP status codes:
client faults are 4xx, model and internal faults are 5xx.
"""

import logging
from datetime import datetime, timezone

from fastapi import Request, status
from fastapi.responses import JSONResponse

from sentiment_service.classification.exceptions import DecodeError, InternalError
from sentiment_service.llm.exceptions import (
    InferenceError,
    InferenceTimeoutError,
    ModelNotAvailableError,
)

logger = logging.getLogger(__name__)


def _error_body(error: str, message: str, details: dict | None = None) -> dict:
    body = {
        "error": error,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if details:
        body["details"] = details
    return body


async def decode_error_handler(request: Request, exc: DecodeError) -> JSONResponse:
    """
    Handle missing or malformed request bodies.
    
    Maps to 400 Bad Request.
    """
    logger.warning(
        "Invalid request body",
        extra={"details": exc.details},
    )
    
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("invalid_request", exc.message, exc.details),
    )


async def inference_error_handler(request: Request, exc: InferenceError) -> JSONResponse:
    """
    Handle model invocation failures.
    
    Maps to 502 Bad Gateway (upstream inference server failed).
    """
    logger.error(
        "Inference error",
        extra={"error": str(exc), "details": exc.details},
    )
    
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=_error_body("inference_failed", "Unable to obtain a response from the model"),
    )


async def model_not_available_handler(request: Request, exc: ModelNotAvailableError) -> JSONResponse:
    """
    Handle a missing model on the inference server.
    
    Maps to 503 Service Unavailable.
    """
    logger.error(
        "Model not available",
        extra={"details": exc.details},
    )
    
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=_error_body("model_not_available", exc.message),
    )


async def inference_timeout_handler(request: Request, exc: InferenceTimeoutError) -> JSONResponse:
    """
    Handle model calls that exceeded their deadline.
    
    Maps to 504 Gateway Timeout.
    """
    logger.error(
        "Inference timeout",
        extra={"error": str(exc)},
    )
    
    return JSONResponse(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        content=_error_body("inference_timeout", "Model inference timed out"),
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle encoding failures and unexpected errors.
    
    Maps to 500 Internal Server Error.
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("internal_error", "An unexpected error occurred"),
    )


# Exception handler mapping for FastAPI app.add_exception_handler().
# Starlette resolves handlers along the exception's MRO, so subclasses
# listed here take precedence over InferenceError.
EXCEPTION_HANDLERS = {
    DecodeError: decode_error_handler,
    InferenceError: inference_error_handler,
    ModelNotAvailableError: model_not_available_handler,
    InferenceTimeoutError: inference_timeout_handler,
    InternalError: internal_error_handler,
    Exception: internal_error_handler,
}
