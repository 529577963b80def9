"""
Abstract base client for LLM inference.

Defines the interface every inference backend must implement, so the
classifier depends on "prompt in, text out" and nothing provider-specific.
"""

from abc import ABC, abstractmethod

import structlog

from sentiment_service.models.llm_models import LLMGenerationRequest, LLMGenerationResponse


logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM inference clients.
    
    Responsibilities:
    - Send generation requests to the inference server
    - Parse responses into LLMGenerationResponse
    - Translate transport failures into InferenceError subclasses
    
    Does NOT handle:
    - Prompt construction (PromptBuilder)
    - Interpreting the generated text (output parser)
    
    Connection-level retries MAY be handled internally, bounded by max_retries.
    """
    
    def __init__(
        self,
        base_url: str,
        timeout: int = 60,
        max_retries: int = 1,
        **kwargs
    ):
        """
        Initialize base client.
        
        Args:
            base_url: Base URL of the inference server (e.g., http://ollama:11434)
            timeout: Per-request timeout in seconds
            max_retries: Total attempts for connection-level failures (1 = no retry)
            **kwargs: Additional provider-specific config
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.extra_config = kwargs
        
        logger.info(
            "Initialized LLM client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            timeout=timeout,
            max_retries=self.max_retries
        )
    
    @abstractmethod
    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate a completion from the model.
        
        Args:
            request: Standardized generation request
            
        Returns:
            LLMGenerationResponse with the generated text and metadata
            
        Raises:
            InferenceConnectionError: Network errors
            InferenceTimeoutError: Request exceeded timeout
            InferenceGenerationError: Server-side generation errors
            ModelNotAvailableError: Model not found
        """
    
    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the inference server is reachable.
        
        Returns:
            True if server is healthy, False otherwise. Never raises.
        """
    
    async def close(self):
        """
        Release connections held by the client.
        
        Default implementation does nothing.
        """
        logger.debug("Closing LLM client", client_class=self.__class__.__name__)
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
