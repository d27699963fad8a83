"""Configuration management for settle-up."""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenAI API (summaries are disabled without a key)
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    summary_language: str = "English"

    # Settlement settings
    strict_participants: bool = True  # Fault on expenses naming unknown people
    settlement_tolerance: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)

    # Display
    currency_symbol: str = "$"


def load_settings(**overrides) -> Settings:
    """Load application settings from environment variables."""
    try:
        return Settings(**overrides)
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load settings. Check your environment and .env file. "
            f"See .env.example for reference.\n"
            f"Error: {e}"
        ) from e
