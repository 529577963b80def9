"""
Configuration settings for the Sentiment Analysis Service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "Sentiment Analysis Service"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_SENTENCES: bool = False  # raw input text in logs; length only when off
    API_PREFIX: str = "/api"
    
    # === Ollama Configuration ===
    OLLAMA_BASE_URL: str = "http://ollama:11434"
    OLLAMA_MODEL: str = "llama2:7b-chat"
    OLLAMA_TIMEOUT: int = 60  # seconds, per HTTP request
    
    # === LLM Generation Parameters ===
    LLM_MAX_TOKENS: int = 8  # Only a short label line is expected
    LLM_TEMPERATURE: float = 0.1
    LLM_MAX_RETRIES: int = 1  # 1 = single attempt, no connection-level retry
    INFERENCE_TIMEOUT: float = 90.0  # seconds, hard bound on the whole model call
    
    # === Cache ===
    CACHE_BACKEND: Literal["redis", "memory"] = "redis"
    REDIS_URL: str = "redis://redis:6379/0"
    REDIS_MAX_CONNECTIONS: int = 50
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
