"""Public domain surface: the Date value type and its collaborators."""

from __future__ import annotations

from civildate.domain.clock import Clock, TimezoneProvider, get_timezone, system_clock
from civildate.domain.date import EPOCH, Date, max_date, min_date
from civildate.domain.errors import (
    DateError,
    DateFormatError,
    DateParseError,
    DateTypeError,
    InvalidDateLiteralError,
)
from civildate.domain.literals import date_literal

__all__ = [
    "EPOCH",
    "Clock",
    "Date",
    "DateError",
    "DateFormatError",
    "DateParseError",
    "DateTypeError",
    "InvalidDateLiteralError",
    "TimezoneProvider",
    "date_literal",
    "get_timezone",
    "max_date",
    "min_date",
    "system_clock",
]
