"""Constructor for date literals written directly in source code.

``date_literal`` is for constants known to be valid when the code is written, such as
fixtures and configuration defaults. It must never see untrusted input; use
``Date.parse`` there and handle ``DateParseError``.
"""

from __future__ import annotations

from civildate.domain.date import Date
from civildate.domain.errors import DateParseError, InvalidDateLiteralError


def date_literal(text: str) -> Date:
    try:
        return Date.parse(text)
    except DateParseError as exc:
        raise InvalidDateLiteralError(f"Invalid date literal {text!r}") from exc


__all__ = ["date_literal"]
