#!/usr/bin/env python3
"""
API package for the phish setlists client.

This package provides the Phish.net gateway, envelope decoding,
and the error taxonomy shared by every caller.
"""

from .client import (
    PhishNetGateway,
)

from .decoding import (
    decode_show_list,
    decode_setlist,
)

from .errors import (
    ConfigError,
    PhishNetError,
    TransportError,
    DecodeError,
)

__all__ = [
    # Gateway
    "PhishNetGateway",
    # Decoding
    "decode_show_list",
    "decode_setlist",
    # Errors
    "ConfigError",
    "PhishNetError",
    "TransportError",
    "DecodeError",
]
