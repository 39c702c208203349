"""Round-trip a date through a live database to check driver and column behaviour."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Column, MetaData, Table, insert, select

from .types import SqlDate

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from civildate.domain import Date

log = logging.getLogger(__name__)

DEFAULT_PROBE_TABLE = "civildate_probe"


def probe_round_trip(engine: Engine, value: Date, *, table_name: str = DEFAULT_PROBE_TABLE) -> Date:
    """Insert ``value`` into a scratch ``DATE NOT NULL`` table and read it back.

    The table is created if missing and dropped afterwards, even when the round trip fails.
    """

    metadata = MetaData()
    table = Table(table_name, metadata, Column("d", SqlDate(), nullable=False))
    metadata.create_all(engine)
    log.debug("Created probe table %s on %s", table_name, engine.dialect.name)
    try:
        with engine.begin() as connection:
            connection.execute(insert(table).values(d=value))
        with engine.connect() as connection:
            loaded = connection.execute(select(table.c.d).limit(1)).scalar_one()
    finally:
        metadata.drop_all(engine)
        log.debug("Dropped probe table %s", table_name)

    log.info("Probe wrote %s and read back %s", value, loaded)
    return loaded
