"""JSON encoding of dates as quoted ``YYYY-MM-DD`` strings."""

from __future__ import annotations

import json

from civildate.domain import Date, DateFormatError, DateParseError

# Whitespace json.loads skips around a top-level value
_JSON_WHITESPACE = " \t\n\r"


def encode_date(value: Date) -> str:
    """Return the JSON string literal for ``value``, e.g. ``'"2015-05-21"'``."""

    return json.dumps(str(value))


def decode_date(payload: str | bytes) -> Date:
    """Decode a JSON string literal into a ``Date``.

    Raises ``DateFormatError`` if the payload is not JSON, is a JSON value other than a
    string, or holds text that is not a valid calendar date. The date is read from the raw
    characters between the quotes, so escaped forms such as ``"\\u0032015-05-21"`` are
    rejected even though they decode to a valid date.
    """

    try:
        text = payload.decode() if isinstance(payload, bytes) else payload
        loaded: object = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DateFormatError("Could not decode JSON into Date: malformed JSON") from exc
    if not isinstance(loaded, str):
        return coerce_date(loaded)
    return coerce_date(text.strip(_JSON_WHITESPACE)[1:-1])


def coerce_date(value: object) -> Date:
    """Convert an already-decoded JSON value into a ``Date``."""

    if not isinstance(value, str):
        raise DateFormatError(
            f"Could not decode JSON into Date: value is not a string ({type(value).__name__})"
        )
    try:
        return Date.parse(value)
    except DateParseError as exc:
        raise DateFormatError(f"Could not decode JSON into Date: {exc}") from exc


class DateJSONEncoder(json.JSONEncoder):
    """``json.JSONEncoder`` that writes nested ``Date`` values in canonical form."""

    def default(self, o: object) -> object:
        if isinstance(o, Date):
            return str(o)
        return super().default(o)


__all__ = ["DateJSONEncoder", "coerce_date", "decode_date", "encode_date"]
