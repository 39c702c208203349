from __future__ import annotations

import json

import pytest

from civildate.adapters.json import DateJSONEncoder, decode_date, encode_date
from civildate.domain import Date, DateFormatError, DateParseError


def test_encode_date_writes_quoted_canonical_text() -> None:
    assert encode_date(Date.parse("2015-05-21")) == '"2015-05-21"'
    assert encode_date(Date.parse("0033-02-03")) == '"0033-02-03"'


def test_decode_date_round_trips_encoded_value() -> None:
    value = Date.parse("2015-05-21")

    assert decode_date(encode_date(value)) == value
    assert decode_date(b'"2015-05-21"') == value


@pytest.mark.parametrize("payload", ["20150521", "null", "true", "[]", '{"d": "2015-05-21"}'])
def test_decode_date_rejects_non_strings(payload: str) -> None:
    with pytest.raises(DateFormatError, match="not a string"):
        decode_date(payload)


@pytest.mark.parametrize("payload", ["2015-05-21", "'2015-05-21'", '"2015-05-21', ""])
def test_decode_date_rejects_malformed_json(payload: str) -> None:
    with pytest.raises(DateFormatError, match="malformed JSON"):
        decode_date(payload)


def test_decode_date_rejects_invalid_calendar_text() -> None:
    with pytest.raises(DateFormatError) as exc:
        decode_date('"2015-02-30"')

    assert isinstance(exc.value.__cause__, DateParseError)


def test_encoder_serializes_nested_dates() -> None:
    payload = {"on": Date.parse("2015-05-21"), "dates": [Date(0)]}

    assert json.dumps(payload, cls=DateJSONEncoder) == (
        '{"on": "2015-05-21", "dates": ["1970-01-01"]}'
    )


def test_encoder_still_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError):
        json.dumps({"value": object()}, cls=DateJSONEncoder)


@pytest.mark.parametrize(
    "payload", ['"\\u0032015-05-21"', '"2015\\u002d05-21"', '"2015-05-2\\u0031"']
)
def test_decode_date_reads_text_between_quotes_without_unescaping(payload: str) -> None:
    assert json.loads(payload) == "2015-05-21"

    with pytest.raises(DateFormatError) as exc:
        decode_date(payload)

    assert isinstance(exc.value.__cause__, DateParseError)


def test_decode_date_allows_surrounding_whitespace() -> None:
    assert decode_date(' \n"2015-05-21"\t') == Date.parse("2015-05-21")
    assert decode_date(b' "2015-05-21" ') == Date.parse("2015-05-21")


def test_decode_date_rejects_undecodable_bytes() -> None:
    with pytest.raises(DateFormatError, match="malformed JSON"):
        decode_date(b'"\xff2015-05-21"')
