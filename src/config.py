"""
Configuration management for the back office
"""

import logging
import threading

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.infrastructure.utilities.constants import (
    BoardSettings,
    ConfigValidation,
    FileSettings,
    RecordStoreSettings,
)


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    environment: str = Field(
        default="development", description="Application environment"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default=FileSettings.LOGS_DIRECTORY, description="Log directory")
    enable_file_logging: bool = Field(default=False, description="Write rotating log files")
    enable_json_logging: bool = Field(default=False, description="Write JSON log file")

    # Record store configuration
    record_store_backend: str = Field(
        default=RecordStoreSettings.SQLALCHEMY_BACKEND,
        description="Persistence backend: memory, sqlalchemy or http",
    )
    database_url: str = Field(
        default=FileSettings.DEFAULT_DATABASE_URL, description="Database connection URL"
    )
    record_store_url: str = Field(
        default="", description="Base URL of the hosted record API"
    )
    record_store_project_id: str = Field(
        default="", description="Project identifier sent to the hosted record API"
    )
    record_store_public_key: str = Field(
        default="", description="Public key sent to the hosted record API"
    )
    http_timeout_seconds: float = Field(
        default=RecordStoreSettings.DEFAULT_HTTP_TIMEOUT_SECONDS,
        description="Timeout for hosted record API calls",
    )
    seed_sample_data: bool = Field(
        default=False, description="Seed the in-memory store with sample records"
    )

    # Board settings
    board_tick_seconds: float = Field(
        default=BoardSettings.DEFAULT_TICK_SECONDS,
        description="Interval of the elapsed-time ticker",
    )
    currency: str = Field(default="USD", description="Currency code")


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None


# ---------------------------------------------------------------------------
# Configuration validation
# ---------------------------------------------------------------------------

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Validates configuration before the application starts"""

    def __init__(self, config: Settings | None = None):
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.config: Settings | None = config

    # ---------------------------- public API ----------------------------
    def validate_all(self) -> bool:
        """Run all validation checks and collect results"""
        if self.config is None:
            try:
                self.config = get_config()
            except (ValueError, TypeError) as exc:  # pragma: no cover
                self.errors.append(f"Failed to load configuration: {exc}")
                return False

        self._validate_environment_settings()
        self._validate_record_store()
        self._validate_board_settings()

        self._log_validation_results()
        return not self.errors

    def get_validation_report(self) -> dict[str, object]:
        """Return detailed report after running `validate_all()`."""
        return {
            "valid": not self.errors,
            "errors": self.errors,
            "warnings": self.warnings,
            "config_summary": {
                "environment": self.config.environment if self.config else None,
                "record_store_backend": (
                    self.config.record_store_backend if self.config else None
                ),
            },
        }

    # --------------------- individual validation helpers ---------------------

    def _validate_environment_settings(self):
        if self.config.environment not in ConfigValidation.VALID_ENVIRONMENTS:
            self.warnings.append(f"Unknown environment: {self.config.environment}")
        if self.config.log_level.upper() not in ConfigValidation.VALID_LOG_LEVELS:
            self.errors.append(f"Invalid log level: {self.config.log_level}")
        if self.config.environment == "production":
            if self.config.log_level.upper() == "DEBUG":
                self.warnings.append("DEBUG logging in production may impact performance")

    def _validate_record_store(self):
        backend = self.config.record_store_backend.lower()
        if backend not in RecordStoreSettings.VALID_BACKENDS:
            self.errors.append(f"Unknown record store backend: {backend}")
            return

        if backend == RecordStoreSettings.HTTP_BACKEND:
            if not self.config.record_store_url:
                self.errors.append("RECORD_STORE_URL is required for the http backend")
            if not self.config.record_store_project_id:
                self.warnings.append("RECORD_STORE_PROJECT_ID is not set")
            if self.config.http_timeout_seconds <= 0:
                self.errors.append("HTTP_TIMEOUT_SECONDS must be positive")
        elif backend == RecordStoreSettings.SQLALCHEMY_BACKEND:
            if not self.config.database_url:
                self.errors.append("DATABASE_URL is required for the sqlalchemy backend")
        elif self.config.environment == "production":
            self.warnings.append("In-memory record store loses all data on restart")

    def _validate_board_settings(self):
        if self.config.board_tick_seconds <= 0:
            self.errors.append("BOARD_TICK_SECONDS must be positive")
        if len(self.config.currency) != 3:
            self.warnings.append(f"Unusual currency: {self.config.currency}")

    # ----------------------------- logging helper -----------------------------

    def _log_validation_results(self):
        if self.errors:
            logger.error("Configuration validation failed", extra={"errors": self.errors, "warnings": self.warnings})
        elif self.warnings:
            logger.warning("Configuration validation passed with warnings", extra={"warnings": self.warnings})
        else:
            logger.info("Configuration validation passed successfully")
