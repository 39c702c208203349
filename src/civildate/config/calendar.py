"""Calendar defaults: which timezone decides what "today" is."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final
from zoneinfo import ZoneInfoNotFoundError

from civildate.domain.clock import get_timezone

from .env import optional_env_var
from .errors import ConfigurationError

if TYPE_CHECKING:
    from datetime import tzinfo

DEFAULT_TIMEZONE: Final[str] = "UTC"
TIMEZONE_ENV_VAR: Final[str] = "CIVILDATE_TIMEZONE"


@dataclass(frozen=True, slots=True)
class CalendarConfig:
    timezone: str = DEFAULT_TIMEZONE

    def resolve_timezone(self) -> tzinfo:
        try:
            return get_timezone(self.timezone)
        except ZoneInfoNotFoundError as exc:
            raise ConfigurationError(f"Unknown timezone configured: {self.timezone!r}") from exc


def get_calendar_config() -> CalendarConfig:
    timezone = optional_env_var(TIMEZONE_ENV_VAR)
    if timezone is None:
        return CalendarConfig()
    return CalendarConfig(timezone=timezone)
