"""Application configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Backend
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = ""
    DEFAULT_MODEL: str = "gpt-4o-mini"
    # Extra named models served by the same endpoint, comma separated
    EXTRA_MODELS: str = ""

    # Default validation options
    DEFAULT_MAX_TOKENS: int = 150
    DEFAULT_TEMPERATURE: float = 0.1
    DEFAULT_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    DEFAULT_SYSTEM_PROMPT: Optional[str] = None
    DEFAULT_MIN_CONFIDENCE: Optional[float] = None

    # Pipeline behaviour
    RAISE_ON_MALFORMED: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def extra_models(self) -> list[str]:
        return [name.strip() for name in self.EXTRA_MODELS.split(",") if name.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
