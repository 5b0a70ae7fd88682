"""Application settings.

All configuration is sourced from environment variables (and optionally `.env`).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class Settings(BaseSettings):
    """Typed environment-backed settings for ProdSignal."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    anthropic_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ANTHROPIC_API_KEY", "API_KEY", "anthropic_api_key"),
    )
    anthropic_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "ANTHROPIC_BASE_URL", "ANTHROPIC_ENDPOINT", "anthropic_base_url"
        ),
    )
    anthropic_model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias=AliasChoices("ANTHROPIC_MODEL", "CLAUDE_MODEL", "anthropic_model"),
    )
    max_output_tokens: int = Field(
        default=4000,
        validation_alias=AliasChoices("PRODSIGNAL_MAX_TOKENS", "max_output_tokens"),
    )

    # Backoff for overloaded / rate-limited responses.
    retry_max_attempts: int = Field(
        default=3,
        validation_alias=AliasChoices("PRODSIGNAL_RETRY_ATTEMPTS", "retry_max_attempts"),
    )
    retry_base_delay_ms: int = Field(
        default=1500,
        validation_alias=AliasChoices(
            "PRODSIGNAL_RETRY_BASE_DELAY_MS", "retry_base_delay_ms"
        ),
    )

    analyze_rate_limit: str = Field(
        default="10 per minute",
        validation_alias=AliasChoices("PRODSIGNAL_ANALYZE_RATE_LIMIT", "analyze_rate_limit"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
