"""Configuration management for nutrigenius."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    environment: str = "development"
    log_level: str = "info"

    # CORS - web frontend origins
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:9002",
    ]

    # OpenAI
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_chat_model: str = "gpt-4o-mini"

    # Generation
    generation_temperature: float = 0.5
    chat_temperature: float = 0.7
    generation_timeout_seconds: float = 60.0

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def generation_enabled(self) -> bool:
        """Check if the generation service is configured."""
        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
