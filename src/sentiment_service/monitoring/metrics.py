"""Custom Prometheus metrics for the Sentiment Analysis Service.

These metrics are exposed at the /metrics endpoint alongside the HTTP
metrics from prometheus-fastapi-instrumentator.
"""

from prometheus_client import Counter, Histogram

# === Cache Metrics ===

cache_lookups_total = Counter(
    "sentiment_cache_lookups_total",
    "Sentiment cache lookups by result",
    ["result"],
)
"""
Cache lookups by result.

Labels:
- result: hit, miss (read failures and unreadable entries count as miss)
"""

cache_writes_total = Counter(
    "sentiment_cache_writes_total",
    "Sentiment cache writes by status",
    ["status"],
)
"""
Labels:
- status: stored, failed
"""

best_effort_failures_total = Counter(
    "best_effort_failures_total",
    "Failures swallowed by best-effort operations",
    ["operation"],
)

# === Classification Metrics ===

classifications_total = Counter(
    "sentiment_classifications_total",
    "Model classifications by resulting label",
    ["sentiment"],
)
"""
Labels:
- sentiment: positive, negative, neutral, unrecognized

A rising share of "unrecognized" means the model is ignoring the few-shot format.
"""

# === LLM Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "LLM generation latency in seconds",
    ["model", "success"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Total tokens processed by the LLM",
    ["model", "token_type"],
)
"""
Labels:
- model: model name
- token_type: prompt, completion
"""
