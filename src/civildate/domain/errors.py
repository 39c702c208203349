"""Error hierarchy for date construction, decoding and binding."""

from __future__ import annotations


class DateError(Exception):
    """Base class for all civildate errors."""


class DateParseError(DateError, ValueError):
    """Raised when text does not match the ``YYYY-MM-DD`` calendar-date format."""


class DateFormatError(DateError, ValueError):
    """Raised when a structured-data value is not a quoted calendar-date string."""


class DateTypeError(DateError, TypeError):
    """Raised when a persistence driver hands back a value that is not date-like."""


class InvalidDateLiteralError(DateError, RuntimeError):
    """Raised by ``date_literal`` for text that was supposed to be a known-valid date.

    Not a ``ValueError`` on purpose: input-validation handlers must not swallow it.
    """
