"""Day-precision calendar dates."""

from __future__ import annotations

from importlib import metadata

from civildate.domain import (
    Date,
    DateError,
    DateFormatError,
    DateParseError,
    DateTypeError,
    InvalidDateLiteralError,
    date_literal,
    max_date,
    min_date,
)

try:
    __version__ = metadata.version("civildate")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "Date",
    "DateError",
    "DateFormatError",
    "DateParseError",
    "DateTypeError",
    "InvalidDateLiteralError",
    "__version__",
    "date_literal",
    "max_date",
    "min_date",
]
