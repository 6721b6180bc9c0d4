"""
Utility modules for RoleScout.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from rolescout.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from rolescout.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    CastingCallStatus,
    ProjectStatus,
    SubscriptionStatus,
    SuggestionType,
    AuditAction,
)
from rolescout.utils.logger import (
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
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "CastingCallStatus",
    "ProjectStatus",
    "SubscriptionStatus",
    "SuggestionType",
    "AuditAction",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
]
