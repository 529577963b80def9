"""
HTTP routes for the Sentiment Analysis Service.

Mounted under API_PREFIX (default /api):
- POST /sentiment-analysis: classify a sentence
- anything else: 404 plain text

Service-level routes (/health) live on service_router without the prefix.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from sentiment_service.api.dependencies import (
    get_analysis_service,
    get_kv_store,
    get_llm_client,
    get_settings,
)
from sentiment_service.api.models import ErrorResponse, HealthResponse
from sentiment_service.classification.normalizer import read_sentence
from sentiment_service.classification.responses import send_ok_response
from sentiment_service.config import Settings
from sentiment_service.llm.base_client import BaseLLMClient
from sentiment_service.models.sentiment_models import (
    ClassificationRequest,
    ClassificationResponse,
)
from sentiment_service.persistence.store import KeyValueStore
from sentiment_service.pipeline import SentimentAnalysisService

router = APIRouter()
service_router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.post(
    "/sentiment-analysis",
    response_model=ClassificationResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify the sentiment of a sentence",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": ClassificationRequest.model_json_schema(),
                }
            },
        }
    },
    responses={
        200: {"description": "Sentiment label, or empty string if the model answer was not recognized"},
        400: {"model": ErrorResponse, "description": "Missing or malformed request body"},
        502: {"model": ErrorResponse, "description": "Model invocation failed"},
        503: {"model": ErrorResponse, "description": "Model not available"},
        504: {"model": ErrorResponse, "description": "Model invocation timed out"},
    },
)
async def perform_sentiment_analysis(
    request: Request,
    service: SentimentAnalysisService = Depends(get_analysis_service),
) -> Response:
    """
    Decode the body, run the memoized pipeline and encode the answer.
    
    The body is decoded by hand so that an absent or malformed payload is a
    DecodeError (400) before anything touches the cache or the model.
    """
    sentence = read_sentence(await request.body())
    sentiment = await service.analyze(sentence)
    return send_ok_response(sentiment)


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def not_found(path: str) -> PlainTextResponse:
    return PlainTextResponse("Not found", status_code=status.HTTP_404_NOT_FOUND)


@service_router.get("/health", response_model=HealthResponse)
async def health(
    response: Response,
    llm_client: BaseLLMClient = Depends(get_llm_client),
    store: KeyValueStore = Depends(get_kv_store),
    app_settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Report reachability of the model server and cache backend.
    
    The service still answers requests with the cache down, so a failing
    cache only degrades; a failing model server makes the check return 503.
    """
    services = {
        "ollama": "ok" if await llm_client.health_check() else "unavailable",
        "cache": "ok" if await store.ping() else "unavailable",
    }
    
    if services["ollama"] != "ok":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        overall = "unhealthy"
    elif services["cache"] != "ok":
        overall = "degraded"
    else:
        overall = "healthy"
    
    return HealthResponse(
        status=overall,
        version=app_settings.APP_VERSION,
        services=services,
    )
