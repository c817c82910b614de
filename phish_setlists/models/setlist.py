#!/usr/bin/env python3
"""
Setlist Models

This module contains the canonical setlist item shape decoded from the
Phish.net showdate query.
"""

from typing import List, NamedTuple, Optional

from ..constants import PHISHNET_SHOW_URL


class SetlistItem(NamedTuple):
    """
    One performed song within a show.

    Attributes:
        set_label: Set number or label ("1", "2", "e" for encore)
        song: Song name
        venue: Venue name
        city: City name
        show_date: Full show date, e.g. "2025-06-28"
        trans_mark: Transition marker following the song (e.g. "->", ",")
        song_id: Phish.net song id
        state: State or province
        permalink: URL slug of the show page on phish.net
        setlist_notes: HTML show notes (same for every item of a show)
    """

    set_label: str
    song: str
    venue: str
    city: str
    show_date: str
    trans_mark: Optional[str] = None
    song_id: Optional[int] = None
    state: Optional[str] = None
    permalink: Optional[str] = None
    setlist_notes: Optional[str] = None

    @property
    def phishnet_url(self) -> Optional[str]:
        """Full URL to the show page on phish.net, if a permalink is known."""
        if not self.permalink:
            return None
        return PHISHNET_SHOW_URL.format(permalink=self.permalink)


class SetlistEnvelope(NamedTuple):
    """
    Decoded showdate response.

    Attributes:
        data: Setlist items in API delivery order
    """

    data: List[SetlistItem]
