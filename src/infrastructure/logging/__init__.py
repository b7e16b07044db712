"""
Logging Infrastructure

Structured logging setup shared by the API, use cases and record stores.
"""

from .logging_config import (
    LoggingConfigOptions,
    get_structured_logger,
    options_from_settings,
    setup_logging,
)

__all__ = [
    "LoggingConfigOptions",
    "get_structured_logger",
    "options_from_settings",
    "setup_logging",
]
