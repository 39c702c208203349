"""Logging setup for the civildate command line."""

from __future__ import annotations

import logging
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR: Final[str] = "CIVILDATE_LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``CIVILDATE_LOG_LEVEL`` or ``default`` when unset."""

    name = optional_env_var(LOG_LEVEL_ENV_VAR)
    if name is None:
        return default
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV_VAR}: {name!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    Without an explicit ``level`` the environment decides, falling back to INFO. Log
    records go to stderr so command output on stdout stays machine readable. Pass
    ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=resolve_log_level() if level is None else level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
