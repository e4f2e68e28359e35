"""
Utility modules for PivotKarir.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants and enums
- exceptions: Error hierarchy
"""

from pivotkarir.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
)
from pivotkarir.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    ComparisonState,
    MatchLevel,
    ProfileSlot,
)
from pivotkarir.utils.exceptions import (
    EmbeddingError,
    InvalidScoreError,
    ParseError,
    PivotKarirError,
    ProviderInitError,
    SessionNotReadyError,
)
from pivotkarir.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    LoggerMixin,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "ComparisonState",
    "MatchLevel",
    "ProfileSlot",
    # Exceptions
    "EmbeddingError",
    "InvalidScoreError",
    "ParseError",
    "PivotKarirError",
    "ProviderInitError",
    "SessionNotReadyError",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
]
