"""Configuration management for Prof Match."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PROF_MATCH_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Keys (no prefix, standard env vars)
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    anthropic_api_key: str | None = Field(default=None, alias="ANTHROPIC_API_KEY")
    google_api_key: str | None = Field(default=None, alias="GOOGLE_API_KEY")

    # Narrative generation
    provider: Literal["openai", "anthropic", "google"] = "anthropic"
    model: str | None = None
    narrative_enabled: bool = True
    narrative_timeout_seconds: float = Field(
        default=30.0,
        ge=1,
        le=300,
        description="Upper bound on one match reason request before falling back",
    )
    narrative_max_retries: int = Field(default=1, ge=0, le=5)
    narrative_max_tokens: int = Field(default=1000, ge=50, le=4000)
    narrative_temperature: float = Field(default=0.7, ge=0, le=1)

    # Threshold policy
    minimum_match_score: float = Field(default=30.0, ge=0, le=100)
    threshold_floor: float = Field(default=20.0, ge=0, le=100)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def api_key_for(self, provider: str) -> str | None:
        """API key configured for a provider."""
        return {
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
            "google": self.google_api_key,
        }.get(provider)

    @property
    def api_key(self) -> str | None:
        """API key for the configured provider."""
        return self.api_key_for(self.provider)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
