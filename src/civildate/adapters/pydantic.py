"""Pydantic field type for ``Date``.

Use ``PydanticDate`` as a model annotation. Values validate from ``Date`` instances or
canonical ``YYYY-MM-DD`` strings only; numbers, stdlib dates and other shapes are
rejected. Dumps emit the canonical string in both python and JSON mode.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from civildate.adapters.json import coerce_date
from civildate.domain import Date


def _validate(value: object) -> Date:
    if isinstance(value, Date):
        return value
    return coerce_date(value)


PydanticDate = Annotated[
    Date,
    PlainValidator(_validate),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "format": "date"}),
]

__all__ = ["PydanticDate"]
