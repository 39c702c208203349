"""Column type binding ``Date`` to SQL ``DATE`` columns."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

from sqlalchemy import Date as SqlDateImpl
from sqlalchemy import String, TypeDecorator

from civildate.domain import Date, DateTypeError

if TYPE_CHECKING:
    from sqlalchemy import Dialect
    from sqlalchemy.types import TypeEngine

log = logging.getLogger(__name__)

# Dialects without a native date type; values are stored as canonical text
_TEXT_DATE_DIALECTS = frozenset({"sqlite"})
# Years whose YYYY-MM-DD text reads back and sorts correctly
_MIN_TEXT_YEAR = 0
_MAX_TEXT_YEAR = 9999


def date_from_db_value(value: object) -> Date:
    """Truncate a driver-supplied date or timestamp to its calendar day.

    A ``datetime`` is truncated in its own timezone (or as wall-clock time when naive), the
    same day a ``DATE`` column holding it would show.
    """

    if isinstance(value, date):
        return Date.from_ymd(value.year, value.month, value.day)
    raise DateTypeError(f"Cannot load {type(value).__name__} as Date")


class SqlDate(TypeDecorator[Date]):
    impl = SqlDateImpl
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name in _TEXT_DATE_DIALECTS:
            return dialect.type_descriptor(String(10))
        return dialect.type_descriptor(SqlDateImpl())

    def process_bind_param(self, value: Date | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if not isinstance(value, Date):
            raise DateTypeError(f"Cannot bind {type(value).__name__} as Date")
        if not _MIN_TEXT_YEAR <= value.year <= _MAX_TEXT_YEAR:
            raise DateTypeError(
                f"Cannot bind {value!r}: year outside {_MIN_TEXT_YEAR}-{_MAX_TEXT_YEAR}"
            )
        return str(value)

    def process_result_value(self, value: object, dialect: Dialect) -> Date | None:
        if value is None:
            return None
        if isinstance(value, str) and dialect.name in _TEXT_DATE_DIALECTS:
            return Date.parse(value)
        return date_from_db_value(value)

    @property
    def python_type(self) -> type[Date]:
        return Date
