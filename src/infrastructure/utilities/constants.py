"""
Application constants for the back office

Centralizes magic numbers and hard-coded values.
"""

from typing import Final


# Record store connection settings
class RecordStoreSettings:
    """Backend names and connection defaults"""

    MEMORY_BACKEND: Final[str] = "memory"
    SQLALCHEMY_BACKEND: Final[str] = "sqlalchemy"
    HTTP_BACKEND: Final[str] = "http"
    VALID_BACKENDS: Final[tuple] = ("memory", "sqlalchemy", "http")

    DEFAULT_HTTP_TIMEOUT_SECONDS: Final[float] = 10.0
    SQLITE_PREFIX: Final[str] = "sqlite:///"


# Database configuration constants
class DatabaseSettings:
    """Database connection and pool configuration"""

    POOL_RECYCLE_SECONDS: Final[int] = 3600  # 1 hour
    CONNECTION_TIMEOUT_SECONDS: Final[int] = 60
    RECORDS_TABLE: Final[str] = "records"


# Logging configuration constants
class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT: Final[int] = 5


# Board and floor plan behaviour
class BoardSettings:
    """Order board and floor plan defaults"""

    DEFAULT_TICK_SECONDS: Final[float] = 1.0
    RECENT_NOTIFICATIONS_LIMIT: Final[int] = 50
    STATUS_FILTER_ALL: Final[str] = "all"


# Configuration validation constants
class ConfigValidation:
    """Accepted configuration values"""

    VALID_ENVIRONMENTS: Final[tuple] = ("development", "test", "staging", "production")
    VALID_LOG_LEVELS: Final[tuple] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# File and directory constants
class FileSettings:
    """File paths and directory settings"""

    LOGS_DIRECTORY: Final[str] = "logs"
    DEFAULT_DATABASE_URL: Final[str] = "sqlite:///data/back_office.db"

    # Log file names
    MAIN_LOG_FILE: Final[str] = "back_office.log"
    ERROR_LOG_FILE: Final[str] = "errors.log"
    JSON_LOG_FILE: Final[str] = "back_office.json.log"
