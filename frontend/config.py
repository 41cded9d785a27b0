# =============================================================================
# frontend/config.py - Client Settings
# =============================================================================
# Settings for code that calls the API from outside the server process.
#
# Usage:
#   from frontend.config import ClientSettings
#   ClientSettings().API_URL
#
# Read on every call so a changed environment takes effect immediately.
# =============================================================================

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """API client settings loaded from environment variables."""

    API_URL: str | None = Field(
        default=None,
        description="Base URL of the marketplace API (e.g., https://api.example.com)"
    )

    API_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds for clients created by the wrappers"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )
