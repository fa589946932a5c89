"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")

    # NS API configuration
    ns_api_token: str | None = Field(
        default=None, description="Subscription key for the NS API portal (NS_API_TOKEN)"
    )
    ns_api_timeout: int = Field(default=10, description="Timeout for NS API requests in seconds")

    # Price cache
    # Unset disables caching
    cache_file: str | None = Field(
        default=None,
        validation_alias=AliasChoices("cache_file", "nstimes_cache_file"),
        description="Path to the JSON price cache file",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("ns_api_timeout", "rate_limit_per_minute")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate numeric limits are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    def require_api_token(self) -> str:
        """Return the NS API token, raising if it is not configured."""
        if not self.ns_api_token:
            raise ValueError("NS_API_TOKEN not found")
        return self.ns_api_token
