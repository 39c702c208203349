from __future__ import annotations

from datetime import UTC, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from civildate.domain.clock import get_timezone, resolve_timezone, system_clock


def test_get_timezone_returns_zoneinfo() -> None:
    zone = get_timezone("Australia/Sydney")

    assert isinstance(zone, ZoneInfo)
    assert zone.key == "Australia/Sydney"


def test_get_timezone_utc_shortcut() -> None:
    assert get_timezone("UTC") is UTC
    assert get_timezone("utc") is UTC


@pytest.mark.parametrize("name", ["Nowhere/Special", "/etc/passwd"])
def test_get_timezone_unknown_raises_lookup_error(name: str) -> None:
    with pytest.raises(ZoneInfoNotFoundError) as exc:
        get_timezone(name)

    assert isinstance(exc.value, LookupError)


def test_resolve_timezone_passes_tzinfo_through() -> None:
    fixed = timezone(timedelta(hours=3))

    assert resolve_timezone(fixed) is fixed
    assert resolve_timezone("UTC") is UTC


def test_resolve_timezone_uses_provider_for_names() -> None:
    fixed = timezone(timedelta(hours=3))

    assert resolve_timezone("Anything", zones=lambda _name: fixed) is fixed


def test_system_clock_is_aware_utc() -> None:
    now = system_clock()

    assert now.tzinfo is UTC
