"""
Unit tests for the Sentiment Analysis Service.

Test individual components in isolation:
- Sentiment enum and wire models
- Prompt builder and Ollama client (httpx.MockTransport)
- Normalizer, output parser, classifier, response assembler
- Key-value stores, sentiment cache, best-effort policy
- Request pipeline and dependency wiring
"""
