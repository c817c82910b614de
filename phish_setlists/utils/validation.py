"""
Validation utilities for the phish setlists client.

This module provides the date-shape checks shared by request building,
response decoding, and the command line.
"""

import re
from typing import Union

_YEAR_RE = re.compile(r"^\d{4}$")
_SHOW_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_valid_year(year: str) -> bool:
    """Check that a year is exactly four digits, e.g. "2025"."""
    return isinstance(year, str) and bool(_YEAR_RE.match(year))


def is_valid_show_date(date: str) -> bool:
    """Check that a date has the YYYY-MM-DD (4-2-2 digit) shape."""
    return isinstance(date, str) and bool(_SHOW_DATE_RE.match(date))


def pad_two_digits(value: Union[int, str]) -> str:
    """
    Render a month or day as a two-digit zero-padded string.

    Raises:
        ValueError: If the value is not an integer in 1..31
    """
    number = int(value)
    if not 1 <= number <= 31:
        raise ValueError(f"Value out of range for a month or day: {value}")
    return f"{number:02d}"
