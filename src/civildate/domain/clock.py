"""Ambient clock and timezone lookup used by the current-date constructors."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class Clock(Protocol):
    def __call__(self) -> datetime: ...


class TimezoneProvider(Protocol):
    def __call__(self, name: str, /) -> tzinfo: ...


def system_clock() -> datetime:
    return datetime.now(UTC)


def get_timezone(name: str) -> tzinfo:
    """Look up an IANA timezone such as ``Australia/Sydney``.

    Unknown identifiers raise ``ZoneInfoNotFoundError``, which is a ``LookupError``.
    Malformed keys (absolute paths, empty strings) are reported the same way.
    """

    if name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except ValueError as exc:
        raise ZoneInfoNotFoundError(f"No time zone found with key {name!r}") from exc


def resolve_timezone(tz: tzinfo | str, *, zones: TimezoneProvider = get_timezone) -> tzinfo:
    if isinstance(tz, str):
        return zones(tz)
    return tz


__all__ = ["Clock", "TimezoneProvider", "get_timezone", "resolve_timezone", "system_clock"]
