"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values (service starts without any environment)
- Loading from environment variables
- Validation and normalization (log level, URL, prefix, media segments)
- Environment detection properties
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings, get_settings


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults_without_environment(self):
        """Test every field has a usable default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.api_prefix == "/flip"
        assert settings.media_vendor == "flipfoundry"
        assert settings.media_suffix == "json"
        assert settings.api_base_url == "http://localhost:8000"


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_loads_from_environment(self):
        """Test environment variables override defaults."""
        env_values = {
            "ENVIRONMENT": "production",
            "MEDIA_VENDOR": "acme",
            "APP_VERSION": "2.0.0",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.environment == Environment.PRODUCTION
        assert settings.media_vendor == "acme"
        assert settings.app_version == "2.0.0"

    def test_log_level_is_uppercased(self):
        """Test log level names are normalized."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Test unknown log levels are rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_url_trailing_slash_removed(self):
        """Test trailing slashes are stripped from the base URL."""
        with patch.dict(os.environ, {"API_BASE_URL": "https://api.test.com/"}, clear=True):
            assert Settings().api_base_url == "https://api.test.com"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("flip", "/flip"), ("/flip/", "/flip"), ("/", ""), ("", ""), ("/api/flip", "/api/flip")],
    )
    def test_prefix_normalized(self, raw, expected):
        """Test the route prefix gets one leading slash and no trailing one."""
        with patch.dict(os.environ, {"API_PREFIX": raw}, clear=True):
            assert Settings().api_prefix == expected

    def test_media_vendor_lowercased(self):
        """Test vendor segments are lower-cased."""
        with patch.dict(os.environ, {"MEDIA_VENDOR": "FlipFoundry"}, clear=True):
            assert Settings().media_vendor == "flipfoundry"

    @pytest.mark.parametrize("vendor", ["flip.foundry", "flip foundry", "", "-flip"])
    def test_media_vendor_invalid(self, vendor):
        """Test vendor segments must be a single token."""
        with patch.dict(os.environ, {"MEDIA_VENDOR": vendor}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestEnvironmentProperties:
    """Test environment detection properties."""

    @pytest.mark.parametrize(
        ("environment", "attribute"),
        [
            ("development", "is_development"),
            ("testing", "is_testing"),
            ("ci", "is_ci"),
            ("production", "is_production"),
        ],
    )
    def test_exactly_one_property_true(self, environment, attribute):
        """Test each environment sets exactly its own flag."""
        with patch.dict(os.environ, {"ENVIRONMENT": environment}, clear=True):
            settings = Settings()

        flags = {
            name: getattr(settings, name)
            for name in ("is_development", "is_testing", "is_ci", "is_production")
        }
        assert flags.pop(attribute) is True
        assert not any(flags.values())


class TestGetSettings:
    """Test cached settings access."""

    def test_get_settings_is_cached(self):
        """Test get_settings() returns the same instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
