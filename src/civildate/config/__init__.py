"""Application configuration helpers."""

from __future__ import annotations

from .calendar import CalendarConfig, get_calendar_config
from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging, resolve_log_level
from .storage import DatabaseConfig, get_database_config

__all__ = [
    "CalendarConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "configure_logging",
    "get_calendar_config",
    "get_database_config",
    "optional_env_var",
    "resolve_log_level",
]
