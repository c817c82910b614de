#!/usr/bin/env python3
"""
Phish Setlists Package

A Python package for browsing Phish show dates and setlists through the
Phish.net v5 API: which days of a month had a show, and the ordered songs
of a given show with their transition marks.

This package provides both a command-line interface and a programmatic
asyncio API.
"""

__version__ = "1.0.0"
__author__ = "Phish Setlists"
__description__ = "Browse Phish show dates and setlists from the Phish.net API"
__license__ = "MIT"

# Import models for public API
from .models import (
    ShowSummary,
    ShowListEnvelope,
    SetlistItem,
    SetlistEnvelope,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_TRANSPORT_ERROR,
    EXIT_DECODE_ERROR,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    DEFAULT_BASE_URL,
    DEFAULT_ARTIST_NAME,
)

# Import API gateway and errors for public API
from .api import (
    PhishNetGateway,
    ConfigError,
    PhishNetError,
    TransportError,
    DecodeError,
)

# Import core functionality for public API
from .core import (
    DayAvailabilityDeriver,
    SetlistAssembler,
    extract_days,
    format_setlist_line,
)

# Import configuration for public API
from .config import Env

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "ShowSummary",
    "ShowListEnvelope",
    "SetlistItem",
    "SetlistEnvelope",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_INPUT_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_TRANSPORT_ERROR",
    "EXIT_DECODE_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "DEFAULT_BASE_URL",
    "DEFAULT_ARTIST_NAME",
    # Gateway and errors
    "PhishNetGateway",
    "ConfigError",
    "PhishNetError",
    "TransportError",
    "DecodeError",
    # Core functionality
    "DayAvailabilityDeriver",
    "SetlistAssembler",
    "extract_days",
    "format_setlist_line",
    # Configuration
    "Env",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
