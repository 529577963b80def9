"""
Sentiment classifier: sentence -> prompt -> model -> label.

The model call is the only slow step in a request and is bounded by an
overall deadline on top of the HTTP client's own timeout.
"""

import asyncio
import time

import structlog

from sentiment_service.classification.output_parser import parse_sentiment
from sentiment_service.llm.base_client import BaseLLMClient
from sentiment_service.llm.exceptions import InferenceTimeoutError
from sentiment_service.llm.prompt_builder import PromptBuilder
from sentiment_service.models.enums import Sentiment


logger = structlog.get_logger(__name__)


class SentimentClassifier:
    """
    Classify one sentence with a single model call.
    
    No retries happen here. InferenceError subclasses propagate unchanged;
    unusable output surfaces as UnrecognizedLabelError.
    """
    
    def __init__(
        self,
        llm_client: BaseLLMClient,
        prompt_builder: PromptBuilder,
        inference_timeout: float = 90.0,
    ):
        """
        Args:
            llm_client: Inference backend
            prompt_builder: Few-shot prompt builder (carries model and token cap)
            inference_timeout: Overall deadline for the model call, in seconds
        """
        self.llm_client = llm_client
        self.prompt_builder = prompt_builder
        self.inference_timeout = inference_timeout
    
    async def generate(self, sentence: str) -> str:
        """
        Run inference for a sentence and return the raw generated text.
        
        Raises:
            InferenceError: Model invocation failed or exceeded the deadline
        """
        request = self.prompt_builder.build_request(sentence)
        start_time = time.perf_counter()
        
        logger.info("Running inference", model=request.model, max_tokens=request.max_tokens)
        try:
            response = await asyncio.wait_for(
                self.llm_client.generate(request),
                timeout=self.inference_timeout,
            )
        except asyncio.TimeoutError as e:
            raise InferenceTimeoutError(
                f"Inference exceeded {self.inference_timeout}s deadline",
                details={"timeout": self.inference_timeout, "model": request.model},
            ) from e
        
        logger.info(
            "Inference result",
            text=response.content,
            finish_reason=response.finish_reason,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return response.content
    
    async def classify(self, sentence: str) -> Sentiment:
        """
        Classify a normalized sentence.
        
        Args:
            sentence: Trimmed input sentence
            
        Returns:
            Recognized Sentiment
            
        Raises:
            InferenceError: Model invocation failed
            UnrecognizedLabelError: Model answered with something other than a label
        """
        generated_text = await self.generate(sentence)
        sentiment = parse_sentiment(generated_text)
        logger.info("Got sentiment", sentiment=sentiment.value)
        return sentiment
