#!/usr/bin/env python3
"""
Command line tool to look up AIRAC cycles.

Examples:
    airac show                  # cycle effective now
    airac show 2012-08-26 1605  # cycles by date or identifier
    airac next 2020-12-31
    airac schedule 2020 2021 --csv airac.csv
"""

import argparse
import logging
import re
import sys
from datetime import datetime, timezone
from typing import List, Optional

from dateutil import parser as date_parser

from . import config
from .models import Airac, AiracSchedule

logger = logging.getLogger(__name__)

_IDENTIFIER_ARGUMENT = re.compile(r'[0-9]{4}')


def resolve_airac(value: Optional[str]) -> Airac:
    """
    Resolve a command line argument into a cycle.

    Args:
        value: Four digits identifier, ISO-8601 date or instant, or None for now

    Returns:
        The matching cycle

    Raises:
        AiracError: If value is an identifier that does not denote a cycle
        ValueError: If value is neither an identifier nor a date
    """
    if value is None:
        return Airac.from_instant(datetime.now(timezone.utc))
    if _IDENTIFIER_ARGUMENT.fullmatch(value):
        return Airac.from_identifier(value)
    try:
        instant = date_parser.isoparse(value)
    except ValueError as e:
        raise ValueError(f"Not an AIRAC identifier or date: {value}") from e
    logger.debug(f"Parsed {value} as {instant.isoformat()}")
    return Airac.from_instant(instant)


def _show(args) -> int:
    for value in args.cycles or [None]:
        print(resolve_airac(value).long_form())
    return 0


def _next(args) -> int:
    print(resolve_airac(args.cycle).next().long_form())
    return 0


def _previous(args) -> int:
    print(resolve_airac(args.cycle).previous().long_form())
    return 0


def _schedule(args) -> int:
    last_year = args.last_year if args.last_year is not None else args.first_year
    schedule = AiracSchedule.for_years(args.first_year, last_year)
    if args.csv:
        schedule.to_csv(args.csv)
    else:
        for airac in schedule:
            print(airac.long_form())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='AIRAC cycle lookup tool')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    subparsers = parser.add_subparsers(dest='command', required=True)

    show = subparsers.add_parser('show', help='Show cycles by date or identifier (default: now)')
    show.add_argument('cycles', help='AIRAC identifiers (YYOO) or ISO dates', nargs='*')
    show.set_defaults(func=_show)

    next_parser = subparsers.add_parser('next', help='Show the cycle following a date or identifier')
    next_parser.add_argument('cycle', help='AIRAC identifier (YYOO) or ISO date', nargs='?')
    next_parser.set_defaults(func=_next)

    previous = subparsers.add_parser('previous', help='Show the cycle preceding a date or identifier')
    previous.add_argument('cycle', help='AIRAC identifier (YYOO) or ISO date', nargs='?')
    previous.set_defaults(func=_previous)

    schedule = subparsers.add_parser('schedule', help='List the cycles of one or more years')
    schedule.add_argument('first_year', help='First year', type=int)
    schedule.add_argument('last_year', help='Last year (defaults to first year)', type=int, nargs='?')
    schedule.add_argument('--csv', help='Write the schedule to this CSV file instead of printing it')
    schedule.set_defaults(func=_schedule)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.WARNING), format=config.LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return args.func(args)
    except ValueError as e:
        logger.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
