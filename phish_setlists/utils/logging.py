"""
Logging utilities for the phish setlists client.

This module provides centralized logging configuration and structured
request logging so every API call leaves a machine-readable trace.
"""

import json
import logging
import time
from typing import Optional


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Reduce HTTP client noise; it would also echo request URLs carrying the key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def log_request_success(
    endpoint: str,
    duration: float,
    record_count: int,
    skipped_records: int = 0,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None,
):
    """
    Log a structured record for a completed API request.

    Args:
        endpoint: Request path relative to the API base (no query string)
        duration: Time from request start to decoded envelope (seconds)
        record_count: Number of records in the decoded envelope
        skipped_records: Number of records dropped while decoding
        timestamp: Event timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    request_record = {
        "event_type": "api_request",
        "timestamp": timestamp,
        "endpoint": endpoint,
        "duration_seconds": round(duration, 3),
        "record_count": record_count,
        "skipped_records": skipped_records,
        "success": True,
    }

    logger.info(f"REQUEST: {json.dumps(request_record, ensure_ascii=False)}")


def log_request_failure(
    endpoint: str,
    duration: float,
    error_kind: str,
    error_message: str,
    status_code: Optional[int] = None,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None,
):
    """
    Log a structured record for a failed API request.

    Args:
        endpoint: Request path relative to the API base (no query string)
        duration: Time until the failure was detected (seconds)
        error_kind: Error class name, e.g. "TransportError"
        error_message: Description of the error that occurred
        status_code: HTTP status when the server answered
        timestamp: Event timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    failure_record = {
        "event_type": "api_request_failure",
        "timestamp": timestamp,
        "endpoint": endpoint,
        "duration_seconds": round(duration, 3),
        "error_kind": error_kind,
        "error_message": error_message,
        "status_code": status_code,
        "success": False,
    }

    logger.warning(f"REQUEST_FAILURE: {json.dumps(failure_record, ensure_ascii=False)}")
