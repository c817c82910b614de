#!/usr/bin/env python3
"""
Show Models

This module contains data structures for the show summaries returned by
the Phish.net year-level query.
"""

from typing import List, NamedTuple, Optional


class ShowSummary(NamedTuple):
    """
    One concert instance from the showyear endpoint.

    Attributes:
        id: Phish.net show id
        date: Show date, always YYYY-MM-DD once decoded
        artist_name: Performing artist, e.g. "Phish"
        venue: Venue name (may be missing from the API payload)
        city: City name
        state: State or province abbreviation
        country: Country name
        tour_name: Tour name, e.g. "2025 Summer Tour"
    """

    id: int
    date: str
    artist_name: str
    venue: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    tour_name: Optional[str] = None


class ShowListEnvelope(NamedTuple):
    """
    Decoded showyear response.

    Attributes:
        data: Show summaries in API delivery order
        skipped_records: Number of records dropped during decoding
    """

    data: List[ShowSummary]
    skipped_records: int = 0
