"""The ``Date`` value type: a calendar day stored as days since 1970-01-01."""

from __future__ import annotations

import re
from calendar import Day, Month
from dataclasses import dataclass
from datetime import UTC, date, datetime, tzinfo
from typing import Final

from civildate.domain import civil
from civildate.domain.clock import (
    Clock,
    TimezoneProvider,
    get_timezone,
    resolve_timezone,
    system_clock,
)
from civildate.domain.errors import DateParseError

_ISO_DATE: Final = re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})")

# Months that open a quarter: Jan, Apr, Jul, Oct
_MONTHS_PER_QUARTER: Final[int] = 3


@dataclass(frozen=True, slots=True, order=True, repr=False)
class Date:
    """A calendar day with no time of day and no timezone.

    ``days`` counts days since 1970-01-01 and may be negative. Equality, hashing and
    ordering are those of the day count. Month and year arithmetic normalizes by carrying
    overflow forward (2021-01-31 plus one month is 2021-03-03), never by clamping.
    """

    days: int

    def __post_init__(self) -> None:
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            raise TypeError(f"Date day count must be an int, got {type(self.days).__name__}")

    # Construction ----------------------------------------------------------------------

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Date:
        """Build a date from components, carrying out-of-range months and days."""

        return cls(civil.ymd_to_days(year, month, day))

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse the canonical ``YYYY-MM-DD`` form.

        Raises ``DateParseError`` when the text does not have exactly that shape or names a
        month or day that does not exist (``2021-02-29``).
        """

        if not isinstance(text, str):
            raise DateParseError(f"Cannot parse {type(text).__name__} as a date")
        match = _ISO_DATE.fullmatch(text)
        if match is None:
            raise DateParseError(f"Invalid date {text!r}: expected YYYY-MM-DD")

        year, month, day = (int(match[name]) for name in ("year", "month", "day"))
        if not 1 <= month <= 12:
            raise DateParseError(f"Invalid date {text!r}: month out of range")
        if not 1 <= day <= civil.days_in_month(year, month):
            raise DateParseError(f"Invalid date {text!r}: day out of range")
        return cls.from_ymd(year, month, day)

    @classmethod
    def from_datetime(
        cls,
        timestamp: datetime,
        tz: tzinfo | str = UTC,
        *,
        zones: TimezoneProvider = get_timezone,
    ) -> Date:
        """Truncate an aware timestamp to the calendar day it falls on in ``tz``."""

        if not isinstance(timestamp, datetime):
            raise TypeError(f"Expected a datetime, got {type(timestamp).__name__}")
        if timestamp.utcoffset() is None:
            raise ValueError("Timestamps must include timezone information")
        local = timestamp.astimezone(resolve_timezone(tz, zones=zones))
        return cls.from_ymd(local.year, local.month, local.day)

    @classmethod
    def from_date(cls, value: date) -> Date:
        if isinstance(value, datetime):
            raise TypeError("Use Date.from_datetime() for datetime values")
        return cls.from_ymd(value.year, value.month, value.day)

    @classmethod
    def today(
        cls,
        tz: tzinfo | str = UTC,
        *,
        clock: Clock = system_clock,
        zones: TimezoneProvider = get_timezone,
    ) -> Date:
        """Return the current calendar day in ``tz`` according to ``clock``."""

        now = clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        return cls.from_datetime(now, tz, zones=zones)

    @classmethod
    def yesterday(
        cls,
        tz: tzinfo | str = UTC,
        *,
        clock: Clock = system_clock,
        zones: TimezoneProvider = get_timezone,
    ) -> Date:
        return cls.today(tz, clock=clock, zones=zones).add_days(-1)

    @classmethod
    def tomorrow(
        cls,
        tz: tzinfo | str = UTC,
        *,
        clock: Clock = system_clock,
        zones: TimezoneProvider = get_timezone,
    ) -> Date:
        return cls.today(tz, clock=clock, zones=zones).add_days(1)

    # Conversion ------------------------------------------------------------------------

    def to_datetime(
        self,
        tz: tzinfo | str = UTC,
        *,
        zones: TimezoneProvider = get_timezone,
    ) -> datetime:
        """Return local midnight at the start of this day in ``tz``."""

        year, month, day = civil.days_to_ymd(self.days)
        return datetime(year, month, day, tzinfo=resolve_timezone(tz, zones=zones))

    def to_date(self) -> date:
        year, month, day = civil.days_to_ymd(self.days)
        return date(year, month, day)

    # Arithmetic ------------------------------------------------------------------------

    def add_days(self, days: int) -> Date:
        return Date(self.days + days)

    def add_months(self, months: int) -> Date:
        year, month, day = civil.days_to_ymd(self.days)
        return Date.from_ymd(year, month + months, day)

    def add_years(self, years: int) -> Date:
        year, month, day = civil.days_to_ymd(self.days)
        return Date.from_ymd(year + years, month, day)

    def start_of_month(self) -> Date:
        year, month, _ = civil.days_to_ymd(self.days)
        return Date.from_ymd(year, month, 1)

    def end_of_month(self) -> Date:
        return self.start_of_month().add_months(1).add_days(-1)

    def start_of_quarter(self) -> Date:
        year, month, _ = civil.days_to_ymd(self.days)
        return Date.from_ymd(year, _quarter_start_month(month), 1)

    def start_of_next_quarter(self) -> Date:
        # Month 13 carries into January of the following year
        year, month, _ = civil.days_to_ymd(self.days)
        return Date.from_ymd(year, _quarter_start_month(month) + _MONTHS_PER_QUARTER, 1)

    def __add__(self, other: object) -> Date:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_days(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Date | int:
        if isinstance(other, Date):
            return self.days - other.days
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_days(-other)

    # Components ------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return civil.days_to_ymd(self.days)[0]

    @property
    def month(self) -> Month:
        return Month(civil.days_to_ymd(self.days)[1])

    @property
    def day(self) -> int:
        return civil.days_to_ymd(self.days)[2]

    @property
    def weekday(self) -> Day:
        return Day(civil.weekday(self.days))

    @property
    def year_day(self) -> int:
        return civil.year_day(self.days)

    @property
    def days_in_month(self) -> int:
        return self.end_of_month().day

    # Text ------------------------------------------------------------------------------

    def __str__(self) -> str:
        year, month, day = civil.days_to_ymd(self.days)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def __repr__(self) -> str:
        return f"Date('{self}')"


def _quarter_start_month(month: int) -> int:
    return month - (month - 1) % _MONTHS_PER_QUARTER


EPOCH: Final = Date(0)


def max_date(a: Date, b: Date) -> Date:
    """Return the later of two dates."""

    return a if a > b else b


def min_date(a: Date, b: Date) -> Date:
    """Return the earlier of two dates."""

    return a if a < b else b


__all__ = ["EPOCH", "Date", "max_date", "min_date"]
