"""
Sentiment classification pipeline components.

- normalizer.py: Request body -> trimmed sentence
- classifier.py: Sentence -> Sentiment via a single model call
- output_parser.py: Generated text -> Sentiment
- responses.py: Optional[Sentiment] -> JSON response
- exceptions.py: DecodeError, ParseError, InternalError
"""

from sentiment_service.classification.classifier import SentimentClassifier
from sentiment_service.classification.exceptions import (
    DecodeError,
    InternalError,
    ParseError,
    PipelineError,
    UnrecognizedLabelError,
)
from sentiment_service.classification.normalizer import (
    decode_request,
    normalize_sentence,
    read_sentence,
)
from sentiment_service.classification.output_parser import parse_sentiment
from sentiment_service.classification.responses import encode_response, send_ok_response

__all__ = [
    "SentimentClassifier",
    "DecodeError",
    "InternalError",
    "ParseError",
    "PipelineError",
    "UnrecognizedLabelError",
    "decode_request",
    "normalize_sentence",
    "read_sentence",
    "parse_sentiment",
    "encode_response",
    "send_ok_response",
]
