from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import StatementError

from civildate.adapters.sqlalchemy import probe_round_trip
from civildate.adapters.sqlalchemy.probe import DEFAULT_PROBE_TABLE
from civildate.domain import Date

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def test_probe_round_trip_returns_written_date(sqlite_engine: Engine) -> None:
    value = Date.parse("2024-02-29")

    assert probe_round_trip(sqlite_engine, value) == value


def test_probe_drops_its_table(sqlite_engine: Engine) -> None:
    probe_round_trip(sqlite_engine, Date.parse("2024-02-29"), table_name="scratch_dates")

    table_names = inspect(sqlite_engine).get_table_names()
    assert "scratch_dates" not in table_names
    assert DEFAULT_PROBE_TABLE not in table_names


def test_probe_drops_its_table_when_the_write_fails(sqlite_engine: Engine) -> None:
    with pytest.raises(StatementError):
        probe_round_trip(sqlite_engine, "2024-02-29")  # pyright: ignore[reportArgumentType]

    assert DEFAULT_PROBE_TABLE not in inspect(sqlite_engine).get_table_names()
