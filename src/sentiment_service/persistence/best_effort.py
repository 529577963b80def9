"""
Best-effort execution policy.

A best-effort operation may fail without affecting the request: its error is
logged and counted, and the caller receives None instead of a result.
"""

from typing import Any, Awaitable, Callable, Optional, TypeVar

import structlog

from sentiment_service.monitoring.metrics import best_effort_failures_total

logger = structlog.get_logger(__name__)

T = TypeVar("T")


async def best_effort(
    operation: str,
    func: Callable[..., Awaitable[T]],
    *args: Any,
    **kwargs: Any,
) -> Optional[T]:
    """
    Await func(*args, **kwargs), discarding any exception.
    
    Args:
        operation: Name used in logs and the best_effort_failures_total metric
        func: Coroutine function to run
        
    Returns:
        The function's result, or None if it raised
    """
    try:
        return await func(*args, **kwargs)
    except Exception as e:
        logger.warning(
            "Best-effort operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        best_effort_failures_total.labels(operation=operation).inc()
        return None
