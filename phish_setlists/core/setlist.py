"""
Setlist assembly module.

This module turns the ordered setlist items of a show into display lines
carrying their transition marks.
"""

import logging
from typing import Iterable, List, Optional

from ..models import SetlistItem

logger = logging.getLogger(__name__)


def format_setlist_line(item: SetlistItem) -> str:
    """
    Render one song as "<song> <mark>", or just "<song>" without a mark.

    A mark that is empty or only whitespace counts as absent.
    """
    mark = item.trans_mark.strip() if item.trans_mark else ""
    if mark:
        return f"{item.song} {mark}"
    return item.song


def show_page_url(items: Iterable[SetlistItem]) -> Optional[str]:
    """Return the phish.net page of the show, taken from the first item with a permalink."""
    for item in items:
        if item.phishnet_url:
            return item.phishnet_url
    return None


class SetlistAssembler:
    """
    Builds display lines for a show's setlist.

    Args:
        gateway: Object providing ``fetch_setlist_for_date`` (normally a
            ``PhishNetGateway``)
    """

    def __init__(self, gateway):
        self.gateway = gateway

    async def build_setlist(self, date: str, include_link: bool = False) -> List[str]:
        """
        Build the setlist lines for ``date`` in API delivery order.

        Args:
            date: Show date as YYYY-MM-DD, already zero-padded by the caller
            include_link: Append the phish.net show page URL as a final line
                when the API supplied a permalink

        Returns:
            One line per song; empty when the show has no data yet
        """
        items = await self.gateway.fetch_setlist_for_date(date)
        lines = [format_setlist_line(item) for item in items]
        if include_link:
            url = show_page_url(items)
            if url:
                lines.append(url)
        logger.info(f"Assembled {len(lines)} setlist lines for {date}")
        return lines
