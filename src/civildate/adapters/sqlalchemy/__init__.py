"""SQLAlchemy adapter package for civildate."""

from __future__ import annotations

from .probe import probe_round_trip
from .types import SqlDate, date_from_db_value

__all__ = ["SqlDate", "date_from_db_value", "probe_round_trip"]
