"""
API error taxonomy.

ConfigError is owned by the config package and re-exported here so that
callers can import every error kind from one place.
"""

from typing import Optional

from ..config import ConfigError


class PhishNetError(Exception):
    """Base class for failures while talking to the Phish.net API."""
    pass


class TransportError(PhishNetError):
    """Network failure, timeout, non-2xx status, or an API-reported error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(PhishNetError):
    """Response body does not match the expected envelope shape."""
    pass


__all__ = ["ConfigError", "PhishNetError", "TransportError", "DecodeError"]
