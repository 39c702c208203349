from __future__ import annotations

import os
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from civildate.domain import Clock


@pytest.fixture
def clock_at() -> Callable[[datetime], Clock]:
    def factory(reference: datetime) -> Clock:
        def _clock() -> datetime:
            return reference

        return _clock

    return factory


@pytest.fixture
def fixed_clock(clock_at: Callable[[datetime], Clock]) -> Clock:
    # Late evening UTC on a leap day: already March 1st in Sydney (UTC+11)
    return clock_at(datetime(2024, 2, 29, 22, 30, tzinfo=UTC))


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()
