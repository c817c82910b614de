#!/usr/bin/env python3
"""
Application Constants

This module contains the remote API defaults and exit codes used
throughout the phish setlists application.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_TRANSPORT_ERROR = 4
EXIT_DECODE_ERROR = 5
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Phish.net API defaults
DEFAULT_BASE_URL = "https://api.phish.net/v5"
DEFAULT_ARTIST_NAME = "Phish"
SHOWS_BY_YEAR_PATH = "setlists/showyear/{year}.json"
SETLIST_BY_DATE_PATH = "setlists/showdate/{date}.json"
PHISHNET_SHOW_URL = "https://phish.net/setlists/{permalink}.html"

# Year navigation
FIRST_SHOW_YEAR = 1983
HIATUS_YEARS = (2005, 2006, 2007)
