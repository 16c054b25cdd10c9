"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a default so the service starts without an env file;
deployments override what they need.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    vendor = settings.media_vendor
    if settings.is_development:
        # Dev-specific behavior
"""

import re
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_VENDOR_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Flip Versioning API",
        description="Application name",
    )
    app_version: str = Field(
        default="1.3.0",
        description="Application release (deprecation markers refer to these releases)",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL, used for RFC 7807 problem type URIs",
    )
    api_prefix: str = Field(
        default="/flip",
        description="Route prefix for versioned resources",
    )

    # Content negotiation
    media_vendor: str = Field(
        default="flipfoundry",
        description="Vendor segment of versioned media types (vnd.<vendor>.<resource>.v<n>)",
    )
    media_suffix: str = Field(
        default="json",
        description="Structured syntax suffix of versioned media types (+json)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the logging level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard level name, got {v!r}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("api_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """
        Ensure the prefix starts with a slash and has none trailing.

        Args:
            v: Route prefix.

        Returns:
            str: Normalized prefix ("" for root mounting).
        """
        stripped = v.strip("/")
        return f"/{stripped}" if stripped else ""

    @field_validator("media_vendor", "media_suffix")
    @classmethod
    def validate_media_segment(cls, v: str) -> str:
        """
        Validate a media type segment.

        Args:
            v: Vendor or suffix segment.

        Returns:
            str: Lower-cased segment.

        Raises:
            ValueError: If the segment contains characters not allowed in a token.
        """
        segment = v.lower()
        if not _VENDOR_PATTERN.match(segment):
            raise ValueError(f"invalid media type segment: {v!r}")
        return segment

    # Environment checks
    @property
    def is_development(self) -> bool:
        """Console logs and the /config endpoint are enabled."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process.

    Tests that change environment variables call get_settings.cache_clear()
    or construct Settings() directly.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
