"""
CLI main application module.

This module contains the main application entry point: it loads the
configuration, runs one lookup against the Phish.net API, prints the
result one value per line, and maps failures to exit codes.
"""

import asyncio
import logging
import sys
from typing import List, Optional, Sequence

from ..constants import (
    EXIT_CONFIG_ERROR,
    EXIT_DECODE_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_TRANSPORT_ERROR,
    EXIT_UNEXPECTED_ERROR,
)

from ..api import (
    PhishNetGateway,
    ConfigError,
    DecodeError,
    TransportError,
)

from ..core import (
    DayAvailabilityDeriver,
    SetlistAssembler,
    available_years,
)

from ..models import ShowSummary

from .parser import (
    create_argument_parser,
)

from ..utils import (
    setup_logging,
    is_valid_year,
    is_valid_show_date,
    pad_two_digits,
)

from ..config import Env

logger = logging.getLogger(__name__)


def _require_year(year: str) -> str:
    year = (year or "").strip()
    if not is_valid_year(year):
        raise ValueError(f"Year must be four digits, got {year!r}")
    return year


def _pad_month(month: str) -> str:
    padded = pad_two_digits(month)
    if int(padded) > 12:
        raise ValueError(f"Month out of range: {month}")
    return padded


def format_show(show: ShowSummary) -> str:
    """Render a show as "<date> <venue>, <city>, <state>", leaving out unknown parts."""
    place = ", ".join(part for part in (show.venue, show.city, show.state) if part)
    return f"{show.date} {place}".rstrip()


def resolve_setlist_date(args) -> str:
    """
    Build the YYYY-MM-DD date for the setlist command.

    Raises:
        ValueError: If neither a valid --date nor --year/--month/--day was given
    """
    if args.date:
        if not is_valid_show_date(args.date):
            raise ValueError(f"Date must be YYYY-MM-DD, got {args.date!r}")
        return args.date

    if not (args.year and args.month and args.day):
        raise ValueError("Provide --date or all of --year, --month and --day")

    year = _require_year(args.year)
    month = _pad_month(args.month)
    return f"{year}-{month}-{pad_two_digits(args.day)}"


async def run_command(args, gateway: PhishNetGateway, artist_name: str) -> List[str]:
    """Run the selected subcommand and return the lines to print."""
    if args.command == "days":
        year = _require_year(args.year)
        month = _pad_month(args.month)
        deriver = DayAvailabilityDeriver(gateway, artist_name=artist_name)
        days = await deriver.list_days(year, month)
        if not days:
            logger.info(f"No {artist_name} shows in {year}-{month}")
        return days

    if args.command == "months":
        deriver = DayAvailabilityDeriver(gateway, artist_name=artist_name)
        return await deriver.list_months(_require_year(args.year))

    if args.command == "setlist":
        date = resolve_setlist_date(args)
        lines = await SetlistAssembler(gateway).build_setlist(
            date, include_link=getattr(args, "link", False)
        )
        if not lines:
            logger.info(f"No setlist data yet for {date}")
        return lines

    if args.command == "latest":
        deriver = DayAvailabilityDeriver(gateway, artist_name=artist_name)
        show = await deriver.latest_show()
        if show is None:
            logger.info(f"No recent {artist_name} shows found")
            return []
        return [format_show(show)]

    if args.command == "tour":
        year = _require_year(args.year)
        tour_name = (args.tour_name or "").strip()
        if not tour_name:
            raise ValueError("Tour name must not be empty")
        deriver = DayAvailabilityDeriver(gateway, artist_name=artist_name)
        shows = await deriver.list_tour_shows(year, tour_name)
        if not shows:
            logger.info(f"No shows found for tour {tour_name!r} in {year}")
        return [format_show(show) for show in shows]

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    # The year list is static and needs no configuration
    if args.command == "years":
        for year in available_years():
            print(year)
        return

    try:
        env = Env.load(cli_args=args)
        gateway = PhishNetGateway.from_env(env)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        lines = asyncio.run(run_command(args, gateway, env.PHISHNET_ARTIST))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        sys.exit(EXIT_INPUT_ERROR)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)
    except TransportError as e:
        logger.error(f"Failed to reach Phish.net: {e}")
        sys.exit(EXIT_TRANSPORT_ERROR)
    except DecodeError as e:
        logger.error(f"Unexpected response from Phish.net: {e}")
        sys.exit(EXIT_DECODE_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)

    for line in lines:
        print(line)
