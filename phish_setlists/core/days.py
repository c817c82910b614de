"""
Day availability module.

This module answers "which years, months or days had a show" for the
target artist, as sorted zero-padded strings ready for display, and
looks up the shows of one tour.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional, Tuple

from ..constants import DEFAULT_ARTIST_NAME, FIRST_SHOW_YEAR, HIATUS_YEARS
from ..models import ShowSummary

logger = logging.getLogger(__name__)


def _matches_artist(show: ShowSummary, artist_name: str) -> bool:
    return show.artist_name.lower() == artist_name.lower()


def _split_date(show: ShowSummary) -> Optional[Tuple[str, str, str]]:
    parts = show.date.split("-")
    if len(parts) != 3:
        logger.debug(f"Show {show.id}: date {show.date!r} is not YYYY-MM-DD, skipping")
        return None
    return parts[0], parts[1], parts[2]


def _sorted_padded(values: Iterable[str], upper: int) -> List[str]:
    numbers = set()
    for value in values:
        try:
            number = int(value)
        except ValueError:
            logger.debug(f"Non-numeric date part {value!r}, skipping")
            continue
        if 1 <= number <= upper:
            numbers.add(number)
    return [f"{number:02d}" for number in sorted(numbers)]


def extract_days(
    shows: Iterable[ShowSummary],
    year: str,
    month: str,
    artist_name: str = DEFAULT_ARTIST_NAME,
) -> List[str]:
    """
    Extract the distinct show days of one month.

    Args:
        shows: Show summaries for the year
        year: Four-digit year, compared as an exact string
        month: Two-digit zero-padded month, compared as an exact string
        artist_name: Artist to keep (case-insensitive exact match)

    Returns:
        Sorted, deduplicated two-digit day strings ("01".."31")
    """
    days = set()
    for show in shows:
        if not _matches_artist(show, artist_name):
            continue
        parts = _split_date(show)
        if parts is None:
            continue
        show_year, show_month, show_day = parts
        if show_year == year and show_month == month:
            days.add(show_day)
    return _sorted_padded(days, upper=31)


def extract_months(
    shows: Iterable[ShowSummary],
    year: str,
    artist_name: str = DEFAULT_ARTIST_NAME,
) -> List[str]:
    """Extract the distinct months of ``year`` with a show, as "01".."12"."""
    months = set()
    for show in shows:
        if not _matches_artist(show, artist_name):
            continue
        parts = _split_date(show)
        if parts is None:
            continue
        if parts[0] == year:
            months.add(parts[1])
    return _sorted_padded(months, upper=12)


def available_years(today: Optional[date] = None) -> List[str]:
    """
    List the years with shows to browse, newest first.

    Covers FIRST_SHOW_YEAR through the current year and leaves out the
    hiatus years.
    """
    if today is None:
        today = date.today()
    return [
        f"{year:04d}"
        for year in range(today.year, FIRST_SHOW_YEAR - 1, -1)
        if year not in HIATUS_YEARS
    ]


def extract_tour_shows(
    shows: Iterable[ShowSummary],
    tour_name: str,
    artist_name: str = DEFAULT_ARTIST_NAME,
) -> List[ShowSummary]:
    """Return the matching-artist shows of ``tour_name`` (exact match), sorted by date."""
    tour_shows = [
        show for show in shows
        if show.tour_name == tour_name and _matches_artist(show, artist_name)
    ]
    return sorted(tour_shows, key=lambda show: show.date)


def find_latest_show(
    shows: Iterable[ShowSummary],
    artist_name: str = DEFAULT_ARTIST_NAME,
    on_or_before: Optional[str] = None,
) -> Optional[ShowSummary]:
    """Return the matching-artist show with the greatest date, if any."""
    candidates = [
        show for show in shows
        if _matches_artist(show, artist_name)
        and (on_or_before is None or show.date <= on_or_before)
    ]
    if not candidates:
        return None
    return max(candidates, key=lambda show: show.date)


class DayAvailabilityDeriver:
    """
    Derives calendar views from the year-level show list.

    Args:
        gateway: Object providing ``fetch_shows_for_year`` (normally a
            ``PhishNetGateway``)
        artist_name: Artist whose shows count
    """

    def __init__(self, gateway, artist_name: str = DEFAULT_ARTIST_NAME):
        self.gateway = gateway
        self.artist_name = artist_name

    async def list_days(self, year: str, month: str) -> List[str]:
        """
        List the days of ``month`` in ``year`` that had a show.

        An empty list means no shows that month. Gateway errors propagate
        unchanged.
        """
        shows = await self.gateway.fetch_shows_for_year(year)
        days = extract_days(shows, year, month, self.artist_name)
        logger.info(f"Found {len(days)} show days for {year}-{month}")
        return days

    async def list_months(self, year: str) -> List[str]:
        """List the months of ``year`` that had a show."""
        shows = await self.gateway.fetch_shows_for_year(year)
        months = extract_months(shows, year, self.artist_name)
        logger.info(f"Found {len(months)} show months for {year}")
        return months

    async def latest_show(self, today: Optional[date] = None) -> Optional[ShowSummary]:
        """
        Find the most recent show on or before ``today``.

        Looks in the current year first and falls back to the previous year
        when the current year has no show yet.
        """
        if today is None:
            today = date.today()
        cutoff = today.isoformat()

        for year in (today.year, today.year - 1):
            shows = await self.gateway.fetch_shows_for_year(f"{year:04d}")
            latest = find_latest_show(shows, self.artist_name, on_or_before=cutoff)
            if latest is not None:
                logger.info(f"Latest show: {latest.date} {latest.venue or ''}".rstrip())
                return latest
            logger.debug(f"No {self.artist_name} shows found in {year}")

        return None

    def list_years(self, today: Optional[date] = None) -> List[str]:
        """List the browsable years, newest first. No request is made."""
        return available_years(today)

    async def list_tour_shows(self, year: str, tour_name: str) -> List[ShowSummary]:
        """
        List the shows of one tour within ``year``, in date order.

        An empty list means the tour name matched nothing that year.
        Gateway errors propagate unchanged.
        """
        shows = await self.gateway.fetch_shows_for_year(year)
        tour_shows = extract_tour_shows(shows, tour_name, self.artist_name)
        logger.info(f"Found {len(tour_shows)} shows for tour {tour_name!r} in {year}")
        return tour_shows
