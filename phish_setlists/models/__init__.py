#!/usr/bin/env python3
"""
Data Models Module

This module contains the remote schema models mirroring the Phish.net
API's JSON envelopes.
"""

from .show import ShowSummary, ShowListEnvelope
from .setlist import SetlistItem, SetlistEnvelope

__all__ = [
    "ShowSummary",
    "ShowListEnvelope",
    "SetlistItem",
    "SetlistEnvelope",
]
