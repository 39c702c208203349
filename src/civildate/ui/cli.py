# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Final

from dotenv import load_dotenv
from sqlalchemy import create_engine

from civildate.adapters.sqlalchemy import probe_round_trip
from civildate.config import (
    CalendarConfig,
    ConfigurationError,
    configure_logging,
    get_calendar_config,
    get_database_config,
)
from civildate.domain import Clock, Date, system_clock

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import tzinfo
    from types import FrameType

log = logging.getLogger(__name__)

_RELATIVE_DAYS: Final[dict[str, str]] = {
    "yesterday": "Print yesterday's date",
    "today": "Print today's date",
    "tomorrow": "Print tomorrow's date",
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="civildate", description="Work with calendar dates")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in _RELATIVE_DAYS.items():
        relative = subparsers.add_parser(name, help=help_text)
        relative.add_argument(
            "--tz",
            type=str,
            help="IANA timezone deciding the current day (defaults to CIVILDATE_TIMEZONE or UTC)",
        )

    info = subparsers.add_parser("info", help="Show the components and boundaries of a date")
    info.add_argument("date", type=str, help="Date in YYYY-MM-DD form")

    add = subparsers.add_parser("add", help="Shift a date by years, months and days")
    add.add_argument("date", type=str, help="Date in YYYY-MM-DD form")
    add.add_argument("--years", type=int, default=0, help="Years to add (applied first)")
    add.add_argument("--months", type=int, default=0, help="Months to add (applied second)")
    add.add_argument("--days", type=int, default=0, help="Days to add (applied last)")

    db_check = subparsers.add_parser(
        "db-check", help="Write a date to a scratch table and read it back"
    )
    db_check.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to DATABASE_URI or in-memory SQLite)",
    )
    db_check.add_argument("--date", type=str, help="Date to write (defaults to today)")

    return parser.parse_args(list(argv))


def _resolve_tz(value: str | None) -> tzinfo:
    config = CalendarConfig(timezone=value) if value else get_calendar_config()
    return config.resolve_timezone()


def _relative_day(command: str) -> Callable[..., Date]:
    constructors: dict[str, Callable[..., Date]] = {
        "yesterday": Date.yesterday,
        "today": Date.today,
        "tomorrow": Date.tomorrow,
    }
    return constructors[command]


def _describe(value: Date) -> list[str]:
    return [
        f"date: {value}",
        f"weekday: {value.weekday.name.title()}",
        f"year_day: {value.year_day}",
        f"days_in_month: {value.days_in_month}",
        f"start_of_month: {value.start_of_month()}",
        f"end_of_month: {value.end_of_month()}",
        f"start_of_quarter: {value.start_of_quarter()}",
        f"start_of_next_quarter: {value.start_of_next_quarter()}",
    ]


def _db_check(args: argparse.Namespace, value: Date) -> Date:
    uri = args.database_uri or get_database_config().uri
    engine = create_engine(uri, future=True)
    try:
        loaded = probe_round_trip(engine, value)
    finally:
        engine.dispose()
    if loaded != value:
        raise RuntimeError(f"Database returned {loaded} for {value}")
    return loaded


def main(argv: Sequence[str] | None = None, *, clock: Clock = system_clock) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
        date_arg: Date | None = None
        tz: tzinfo | None = None
        if parsed_args.command in _RELATIVE_DAYS:
            tz = _resolve_tz(parsed_args.tz)
        elif parsed_args.command in ("info", "add"):
            date_arg = Date.parse(parsed_args.date)
        elif parsed_args.command == "db-check":
            tz = _resolve_tz(None)
            if parsed_args.date:
                date_arg = Date.parse(parsed_args.date)
    except (ValueError, LookupError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command in _RELATIVE_DAYS:
            print(_relative_day(parsed_args.command)(tz, clock=clock))
        elif parsed_args.command == "info" and date_arg is not None:
            print("\n".join(_describe(date_arg)))
        elif parsed_args.command == "add" and date_arg is not None:
            shifted = (
                date_arg.add_years(parsed_args.years)
                .add_months(parsed_args.months)
                .add_days(parsed_args.days)
            )
            print(shifted)
        elif parsed_args.command == "db-check":
            value = date_arg if date_arg is not None else Date.today(tz or "UTC", clock=clock)
            print(_db_check(parsed_args, value))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
