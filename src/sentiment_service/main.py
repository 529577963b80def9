"""
FastAPI application entry point for the Sentiment Analysis Service.
"""

import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from sentiment_service.api.dependencies import get_kv_store, get_llm_client
from sentiment_service.api.error_handlers import EXCEPTION_HANDLERS
from sentiment_service.api.middleware import RequestTracingMiddleware
from sentiment_service.api.routes import router as api_router
from sentiment_service.api.routes import service_router
from sentiment_service.config import settings
from sentiment_service.logging_config import configure_logging
from sentiment_service.persistence.redis_client import RedisClient

# Configure structured logging before the app starts emitting events
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT, settings.LOG_SENTENCES)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Few-shot LLM sentiment classification with memoized results",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (outermost, so request_id is in all logs)
app.add_middleware(RequestTracingMiddleware)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(service_router, tags=["service"])
app.include_router(api_router, prefix=settings.API_PREFIX, tags=["sentiment"])


@app.on_event("startup")
async def startup():
    """Log configuration and check the model server is reachable."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        ollama_base_url=settings.OLLAMA_BASE_URL,
        model=settings.OLLAMA_MODEL,
        cache_backend=settings.CACHE_BACKEND,
    )
    
    if await get_llm_client().health_check():
        logger.info("Ollama connection successful")
    else:
        logger.error("Ollama connection failed", ollama_base_url=settings.OLLAMA_BASE_URL)


@app.on_event("shutdown")
async def shutdown():
    """Close pooled connections to Ollama and Redis."""
    logger.info("Application shutdown")
    await get_llm_client().close()
    await get_kv_store().close()
    await RedisClient.close_async_pool()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "sentiment": f"{settings.API_PREFIX}/sentiment-analysis",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "sentiment_service.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
