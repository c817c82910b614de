#!/usr/bin/env python3
"""
Core package for the phish setlists client.

This package provides the derivations built on top of the API gateway:
show-day availability per year, month and tour, and formatted setlists
per date.
"""

from .days import (
    DayAvailabilityDeriver,
    extract_days,
    extract_months,
    find_latest_show,
    available_years,
    extract_tour_shows,
)

from .setlist import (
    SetlistAssembler,
    format_setlist_line,
    show_page_url,
)

__all__ = [
    # Day availability
    "DayAvailabilityDeriver",
    "extract_days",
    "extract_months",
    "find_latest_show",
    "available_years",
    "extract_tour_shows",
    # Setlist assembly
    "SetlistAssembler",
    "format_setlist_line",
    "show_page_url",
]
