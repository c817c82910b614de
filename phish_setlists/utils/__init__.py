"""
Utilities module for the phish setlists client.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup and request records
- Validation utilities for year/date shapes and zero-padding
"""

from .logging import setup_logging, log_request_success, log_request_failure

from .validation import is_valid_year, is_valid_show_date, pad_two_digits

__all__ = [
    "setup_logging",
    "log_request_success",
    "log_request_failure",
    "is_valid_year",
    "is_valid_show_date",
    "pad_two_digits",
]
