"""Database configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var

DEFAULT_DATABASE_URI: Final[str] = "sqlite+pysqlite:///:memory:"
DATABASE_URI_ENV_VAR: Final[str] = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str = DEFAULT_DATABASE_URI


def get_database_config() -> DatabaseConfig:
    env_uri = optional_env_var(DATABASE_URI_ENV_VAR)
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    return DatabaseConfig()
