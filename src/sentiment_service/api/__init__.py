"""
FastAPI API routes and endpoints.

- routes.py: POST /api/sentiment-analysis, /api catch-all 404, GET /health
- dependencies.py: Dependency injection for LLM client, store, pipeline
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request ID tracing
"""

from sentiment_service.api import dependencies, error_handlers, models
from sentiment_service.api.routes import router, service_router

__all__ = [
    "router",
    "service_router",
    "dependencies",
    "error_handlers",
    "models",
]
