"""Configuration management for the application."""
from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_TITLE: str = "Gemini Chat"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    CORS_ORIGINS: List[str] = ["*"]

    # Session storage (single JSON file, last write wins)
    DATA_PATH: str = "mock-data.json"

    # Google Generative Language API
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-pro"
    GEMINI_MAX_OUTPUT_TOKENS: int = 2048
    GEMINI_TEMPERATURE: float = 0.4

    # Retry for the ask call
    ASK_MAX_RETRIES: int = 3
    ASK_RETRY_DELAY_SECONDS: float = 1.0

    # Application
    TITLE_MAX_LENGTH: int = 48
    DEFAULT_THEME: str = "light"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
