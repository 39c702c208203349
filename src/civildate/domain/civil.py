"""Proleptic Gregorian calendar arithmetic on epoch day counts.

Day counts are signed integers relative to 1970-01-01 (day 0). Every function here is
total over Python integers: there is no minimum or maximum year, and out-of-range month
or day fields passed to ``ymd_to_days`` are carried into the next higher field instead of
being rejected.
"""

from __future__ import annotations

from typing import Final

DAYS_PER_WEEK: Final[int] = 7

_DAYS_IN_MONTH: Final = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
# Cumulative days before each month in a common year; index 0 unused
_DAYS_BEFORE_MONTH: Final = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

_DAYS_PER_400_YEARS: Final[int] = 146097
_DAYS_PER_100_YEARS: Final[int] = 36524
_DAYS_PER_4_YEARS: Final[int] = 1461

# 1970-01-01 was a Thursday (Monday == 0)
_EPOCH_WEEKDAY: Final[int] = 3


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the length of ``month`` (1-12) in ``year``."""

    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _days_before_year(year: int) -> int:
    # Floor division keeps this valid for year 0 and negative years
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _ordinal(year: int, month: int, day: int) -> int:
    # 0001-01-01 is ordinal 1, matching datetime.date.toordinal()
    return _days_before_year(year) + _days_before_month(year, month) + day


_EPOCH_ORDINAL: Final[int] = _ordinal(1970, 1, 1)


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Carry a month outside 1-12 into the year.

    Month 13 is January of the following year and month 0 is December of the previous
    one.
    """

    carry, index = divmod(month - 1, 12)
    return year + carry, index + 1


def ymd_to_days(year: int, month: int, day: int) -> int:
    """Convert a calendar triple to its epoch day count, normalizing overflow.

    The month is carried into the year first, then ``day - 1`` days are counted from the
    first of the resulting month, so 1999-06-31 is 1999-07-01 and 2000-03-00 is
    2000-02-29.
    """

    year, month = normalize_month(year, month)
    return _ordinal(year, month, 1) + (day - 1) - _EPOCH_ORDINAL


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert an epoch day count back to ``(year, month, day)``."""

    # Zero-based ordinal; divmod floors, so negative counts land in earlier cycles
    n = days + _EPOCH_ORDINAL - 1
    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    if n1 == 4 or n100 == 4:
        # Last day of a leap cycle
        return year - 1, 12, 31

    month, day = _year_day_to_month_day(year, n + 1)
    return year, month, day


def _year_day_to_month_day(year: int, year_day: int) -> tuple[int, int]:
    for month in range(1, 13):
        length = days_in_month(year, month)
        if year_day <= length:
            return month, year_day
        year_day -= length
    raise ValueError(f"day of year out of range for {year}: {year_day}")


def weekday(days: int) -> int:
    """Return the day of the week for an epoch day count (Monday == 0)."""

    return (days + _EPOCH_WEEKDAY) % DAYS_PER_WEEK


def year_day(days: int) -> int:
    """Return the 1-based day of the year (January 1st == 1)."""

    year, _, _ = days_to_ymd(days)
    return days - ymd_to_days(year, 1, 1) + 1


__all__ = [
    "DAYS_PER_WEEK",
    "days_in_month",
    "days_to_ymd",
    "is_leap_year",
    "normalize_month",
    "weekday",
    "year_day",
    "ymd_to_days",
]
