"""
Sentiment Analysis Service.

Classifies short sentences as positive, negative or neutral using a
few-shot prompt against a text-generation model, and memoizes every
recognized result in a key-value store so repeated sentences skip inference.

Architecture: FastAPI request pipeline + Ollama inference + Redis cache
"""

__version__ = "0.1.0"
