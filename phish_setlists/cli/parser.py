"""
CLI argument parser module.

Global options come from the configuration schema; each lookup is a
subcommand.
"""

from argparse import ArgumentParser

from ..config.loader import ConfigLoader


def create_argument_parser() -> ArgumentParser:
    """Create and configure the argument parser."""
    parser = ArgumentParser(
        prog="phish-setlists",
        description="Browse Phish show dates and setlists from the Phish.net API",
        epilog="""
Examples:
  phish-setlists years
  phish-setlists days --year 2025 --month 6
  phish-setlists setlist --date 2025-06-28
  phish-setlists setlist --year 2025 --month 6 --day 28
  phish-setlists latest
  phish-setlists tour --year 2025 --tour "2025 Summer Tour"
        """,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )
    ConfigLoader.add_schema_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("years", help="List the years to browse, newest first")

    days = subparsers.add_parser("days", help="List the days of a month that had a show")
    days.add_argument("--year", required=True, help="Four-digit year, e.g. 2025")
    days.add_argument("--month", required=True, help="Month number, e.g. 6 or 06")

    months = subparsers.add_parser("months", help="List the months of a year that had a show")
    months.add_argument("--year", required=True, help="Four-digit year, e.g. 2025")

    setlist = subparsers.add_parser("setlist", help="Print the setlist of one show")
    setlist.add_argument("--date", help="Show date as YYYY-MM-DD")
    setlist.add_argument("--year", help="Four-digit year (with --month and --day)")
    setlist.add_argument("--month", help="Month number")
    setlist.add_argument("--day", help="Day number")
    setlist.add_argument(
        "--link",
        action="store_true",
        help="Print the phish.net show page URL after the songs",
    )

    subparsers.add_parser("latest", help="Show the most recent show date and venue")

    tour = subparsers.add_parser("tour", help="List the shows of one tour in date order")
    tour.add_argument("--year", required=True, help="Four-digit year, e.g. 2025")
    tour.add_argument("--tour", required=True, dest="tour_name", help="Exact Phish.net tour name")

    return parser
