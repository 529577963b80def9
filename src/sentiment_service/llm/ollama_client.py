"""
Ollama client implementation for LLM inference.

Communicates with the Ollama API using httpx AsyncClient. Supports:
- Plain-text completion with a bounded token budget
- Connection pooling and optional connection-level retries
- Health checks
"""

import asyncio
import json
import time
from typing import Optional

import httpx
import structlog

from sentiment_service.llm.base_client import BaseLLMClient
from sentiment_service.llm.exceptions import (
    InferenceConnectionError,
    InferenceError,
    InferenceGenerationError,
    InferenceTimeoutError,
    ModelNotAvailableError,
)
from sentiment_service.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from sentiment_service.monitoring.metrics import llm_latency_seconds, llm_tokens_total


logger = structlog.get_logger(__name__)


class OllamaClient(BaseLLMClient):
    """
    Ollama-specific LLM client using httpx for async HTTP communication.
    
    API Endpoints:
    - POST /api/generate: Generate completion
    - GET /api/tags: List available models (health check)
    
    The prompt is sent with ``raw: true`` by default because it already
    carries the chat markup (<<SYS>>, <INST>) the model expects.
    """
    
    def __init__(
        self,
        base_url: str = "http://ollama:11434",
        timeout: int = 60,
        max_retries: int = 1,
        raw_prompt: bool = True,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs
    ):
        """
        Initialize Ollama client.
        
        Args:
            base_url: Ollama server URL
            timeout: Request timeout in seconds
            max_retries: Total attempts for network errors and 5xx responses
            raw_prompt: Bypass Ollama's prompt templating
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Custom httpx transport (tests inject httpx.MockTransport)
            **kwargs: Additional config
        """
        super().__init__(base_url, timeout, max_retries, **kwargs)
        
        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )
        
        self.raw_prompt = raw_prompt
        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport
    
    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the pooled async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                follow_redirects=True
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client
    
    def _build_payload(self, request: LLMGenerationRequest) -> dict:
        """
        Build the POST /api/generate body.
        
        {
            "model": "llama2:7b-chat",
            "prompt": "...",
            "stream": false,
            "raw": true,
            "options": {"temperature": 0.1, "num_predict": 8}
        }
        """
        payload = {
            "model": request.model,
            "prompt": request.prompt,
            "stream": False,
            "raw": self.raw_prompt,
            "options": {
                "temperature": request.temperature,
                "num_predict": request.max_tokens,
            }
        }
        return payload
    
    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate a completion using the Ollama API.
        
        Response body:
        {
            "model": "llama2:7b-chat",
            "created_at": "2026-10-19T...",
            "response": "Bot: positive\\n",
            "done": true,
            "done_reason": "stop",
            "eval_count": 4,
            "prompt_eval_count": 120
        }
        
        An empty "response" is returned as empty content; deciding whether
        that is a usable label is left to the caller.
        """
        start_time = time.time()
        payload = self._build_payload(request)
        
        logger.info(
            "Sending generation request to Ollama",
            model=request.model,
            prompt_length=len(request.prompt),
            max_tokens=request.max_tokens,
        )
        
        last_error: Optional[InferenceError] = None
        for attempt in range(1, self.max_retries + 1):
            try:
                client = await self._get_client()
                response = await client.post(
                    "/api/generate",
                    json=payload,
                    timeout=self.timeout
                )
                response.raise_for_status()
                
                response_data = response.json()
                latency_ms = int((time.time() - start_time) * 1000)
                
                content = response_data.get("response")
                if not isinstance(content, str):
                    raise InferenceGenerationError(
                        "Ollama response has no generated text",
                        details={"response": response_data}
                    )
                
                model_version = response_data.get("model", request.model)
                finish_reason = response_data.get("done_reason") or (
                    "stop" if response_data.get("done") else "incomplete"
                )
                prompt_tokens = response_data.get("prompt_eval_count")
                completion_tokens = response_data.get("eval_count")
                
                logger.info(
                    "Ollama generation successful",
                    model=model_version,
                    latency_ms=latency_ms,
                    prompt_tokens=prompt_tokens,
                    completion_tokens=completion_tokens,
                    finish_reason=finish_reason,
                    attempt=attempt
                )
                
                llm_latency_seconds.labels(
                    model=model_version, success="true"
                ).observe(latency_ms / 1000.0)
                if prompt_tokens:
                    llm_tokens_total.labels(
                        model=model_version, token_type="prompt"
                    ).inc(prompt_tokens)
                if completion_tokens:
                    llm_tokens_total.labels(
                        model=model_version, token_type="completion"
                    ).inc(completion_tokens)
                
                return LLMGenerationResponse(
                    content=content,
                    model_version=model_version,
                    finish_reason=finish_reason,
                    prompt_tokens=prompt_tokens,
                    completion_tokens=completion_tokens,
                    latency_ms=latency_ms,
                    created_at=response_data.get("created_at"),
                    raw_metadata={
                        "total_duration": response_data.get("total_duration"),
                        "load_duration": response_data.get("load_duration"),
                        "eval_duration": response_data.get("eval_duration"),
                    }
                )
            
            except httpx.TimeoutException as e:
                logger.warning(
                    "Ollama request timeout",
                    attempt=attempt,
                    max_retries=self.max_retries,
                    timeout=self.timeout,
                    error=str(e)
                )
                last_error = InferenceTimeoutError(
                    f"Request timeout after {self.timeout}s",
                    details={"attempt": attempt, "timeout": self.timeout}
                )
            
            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                error_text = e.response.text
                
                logger.error(
                    "Ollama HTTP error",
                    status_code=status_code,
                    error_text=error_text,
                    attempt=attempt
                )
                
                if status_code == 404:
                    raise ModelNotAvailableError(
                        f"Model not found: {request.model}",
                        details={"model": request.model, "status": status_code}
                    )
                if status_code < 500:
                    raise InferenceGenerationError(
                        f"Ollama client error: {status_code}",
                        details={"status": status_code, "error": error_text}
                    )
                last_error = InferenceGenerationError(
                    f"Ollama server error: {status_code}",
                    details={"status": status_code, "error": error_text}
                )
            
            except httpx.TransportError as e:
                logger.warning(
                    "Ollama network error",
                    attempt=attempt,
                    max_retries=self.max_retries,
                    error=str(e)
                )
                last_error = InferenceConnectionError(
                    f"Network error: {e}",
                    details={"attempt": attempt, "error_type": type(e).__name__}
                )
            
            except json.JSONDecodeError as e:
                logger.error("Failed to parse Ollama response JSON", error=str(e))
                raise InferenceGenerationError(
                    "Invalid JSON response from Ollama",
                    details={"parse_error": str(e)}
                )
            
            if attempt < self.max_retries:
                backoff = 2 ** attempt
                logger.info("Retrying Ollama request", backoff_seconds=backoff, attempt=attempt)
                await asyncio.sleep(backoff)
        
        llm_latency_seconds.labels(
            model=request.model, success="false"
        ).observe(time.time() - start_time)
        raise last_error or InferenceGenerationError("Generation failed after all attempts")
    
    async def health_check(self) -> bool:
        """
        Check Ollama server health via GET /api/tags.
        """
        try:
            client = await self._get_client()
            response = await client.get("/api/tags", timeout=5.0)
            response.raise_for_status()
            return True
        except httpx.HTTPError as e:
            logger.warning("Ollama health check failed", error=str(e))
            return False
    
    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Ollama client connection")
    
    async def __aenter__(self):
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
