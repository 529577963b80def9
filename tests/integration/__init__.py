"""
Integration tests for the Sentiment Analysis Service.

Test components together or against real external services:
- API endpoints (FastAPI TestClient with overridden collaborators)
- Ollama client and classifier (real model, skipped if unreachable)
- Redis-backed cache (real Redis, skipped if unreachable)
"""
