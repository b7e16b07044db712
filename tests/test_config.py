"""
Tests for configuration management
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.config import ConfigValidator, Settings, get_config, reset_config


class TestSettings:
    """Test Settings model"""

    def test_settings_from_environment(self):
        """Values come from the patched test environment"""
        settings = Settings(_env_file=None)
        assert settings.environment == "test"
        assert settings.log_level == "DEBUG"
        assert settings.record_store_backend == "memory"
        assert settings.board_tick_seconds == 0.05

    def test_settings_defaults(self):
        """Unset fields fall back to defaults"""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.record_store_backend == "sqlalchemy"
        assert settings.database_url == "sqlite:///data/back_office.db"
        assert settings.currency == "USD"
        assert settings.seed_sample_data is False

    def test_settings_field_types(self):
        """Environment strings are coerced"""
        with patch.dict(os.environ, {"HTTP_TIMEOUT_SECONDS": "2.5", "SEED_SAMPLE_DATA": "true"}):
            settings = Settings(_env_file=None)
        assert settings.http_timeout_seconds == 2.5
        assert settings.seed_sample_data is True

    def test_settings_invalid_type(self):
        with patch.dict(os.environ, {"BOARD_TICK_SECONDS": "often"}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestGetConfig:
    """Test the cached settings accessor"""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config_rereads_environment(self):
        first = get_config()
        with patch.dict(os.environ, {"CURRENCY": "EUR"}):
            reset_config()
            second = get_config()
        assert second is not first
        assert second.currency == "EUR"


class TestConfigValidator:
    """Test ConfigValidator"""

    def test_valid_test_configuration(self):
        validator = ConfigValidator(Settings(_env_file=None))
        assert validator.validate_all() is True

        report = validator.get_validation_report()
        assert report["valid"] is True
        assert report["config_summary"] == {
            "environment": "test",
            "record_store_backend": "memory",
        }

    def test_http_backend_needs_url(self):
        settings = Settings(_env_file=None, record_store_backend="http", record_store_url="")
        validator = ConfigValidator(settings)

        assert validator.validate_all() is False
        assert "RECORD_STORE_URL is required for the http backend" in validator.errors
        assert "RECORD_STORE_PROJECT_ID is not set" in validator.warnings

    def test_unknown_backend(self):
        validator = ConfigValidator(Settings(_env_file=None, record_store_backend="redis"))
        assert validator.validate_all() is False
        assert validator.errors == ["Unknown record store backend: redis"]

    def test_backend_name_is_case_insensitive(self):
        validator = ConfigValidator(Settings(_env_file=None, record_store_backend="MEMORY"))
        assert validator.validate_all() is True
        assert validator.errors == []

    def test_invalid_log_level_and_tick(self):
        validator = ConfigValidator(
            Settings(_env_file=None, log_level="LOUD", board_tick_seconds=0)
        )
        assert validator.validate_all() is False
        assert "Invalid log level: LOUD" in validator.errors
        assert "BOARD_TICK_SECONDS must be positive" in validator.errors

    def test_production_warnings(self):
        validator = ConfigValidator(
            Settings(_env_file=None, environment="production", log_level="DEBUG")
        )
        assert validator.validate_all() is True
        assert "DEBUG logging in production may impact performance" in validator.warnings
        assert "In-memory record store loses all data on restart" in validator.warnings

    def test_validator_loads_global_config(self):
        validator = ConfigValidator()
        validator.validate_all()
        assert validator.config is get_config()
