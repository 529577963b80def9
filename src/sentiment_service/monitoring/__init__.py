"""Monitoring and metrics instrumentation for the Sentiment Analysis Service."""

from sentiment_service.monitoring.metrics import (
    best_effort_failures_total,
    cache_lookups_total,
    cache_writes_total,
    classifications_total,
    llm_latency_seconds,
    llm_tokens_total,
)

__all__ = [
    "cache_lookups_total",
    "cache_writes_total",
    "best_effort_failures_total",
    "classifications_total",
    "llm_latency_seconds",
    "llm_tokens_total",
]
