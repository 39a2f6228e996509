from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="PULSEAI_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # AI backend settings
    deepseek_api_key: Optional[str] = Field(
        None,
        description="API key for the DeepSeek chat endpoint",
        validation_alias=AliasChoices("PULSEAI_DEEPSEEK_API_KEY", "DEEPSEEK_API_KEY"),
    )
    deepseek_base_url: str = Field("https://api.deepseek.com", description="OpenAI compatible base URL")
    deepseek_model: str = Field("deepseek-chat", description="Chat model used for analysis")
    ai_timeout: float = Field(20.0, description="Seconds before a full analysis request is abandoned")
    quick_ai_timeout: float = Field(15.0, description="Seconds before a quick analysis request is abandoned")
    ai_max_tokens: int = Field(1000, description="Completion token limit")
    ai_temperature: float = Field(0.1, description="Sampling temperature")
    ai_max_attempts: int = Field(3, description="Attempts before giving up on the AI backend")

    # Prompt sampling
    ai_sample_lines: int = Field(50, description="Capture lines sent with a full analysis prompt")
    quick_sample_lines: int = Field(20, description="Capture lines sent with a quick analysis prompt")

    # Upload settings
    max_upload_bytes: int = Field(2 * 1024 * 1024, description="Largest accepted CSV upload")

    # History settings
    history_enabled: bool = Field(True, description="Keep an in-memory analysis history")
    history_result_chars: int = Field(5000, description="Characters of each result kept in history")

    environment: str = Field("development", description="Deployment environment label")
    log_level: str = Field("INFO", description="Level for pulseai loggers")


@lru_cache()
def get_settings() -> Settings:
    """Return a singleton settings instance."""
    return Settings()


settings = get_settings()
