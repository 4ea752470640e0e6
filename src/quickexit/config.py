"""QuickExit configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"

    # OpenAI
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("openai_api_key", "openai_key"),
    )
    excuse_model: str = "gpt-4o"
    excuse_temperature: float = 0.8
    openai_timeout_seconds: float = 10.0

    # Generation policy
    ai_probability: float = Field(default=0.3, ge=0.0, le=1.0)
    fallback_believability_min: int = Field(default=8, ge=1, le=10)
    fallback_believability_max: int = Field(default=10, ge=1, le=10)
    default_believability: int = Field(default=7, ge=1, le=10)

    # Recent excuses
    recent_excuses_default_limit: int = 10

    # Metrics CSV (empty disables)
    generation_metrics_path: str = ""

    @model_validator(mode="after")
    def _check_believability_range(self) -> "Settings":
        if self.fallback_believability_min > self.fallback_believability_max:
            raise ValueError(
                "fallback_believability_min must not exceed fallback_believability_max"
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def has_openai_credentials(self) -> bool:
        """Check if an OpenAI API key is configured."""
        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
