"""
Envelope decoding module.

This module turns parsed JSON bodies from the Phish.net API into the
typed envelopes in ``phish_setlists.models``.

Malformed show records are skipped and counted; a malformed setlist
item fails the whole call.
"""

import logging
from typing import Any, Optional

from ..models import SetlistEnvelope, SetlistItem, ShowListEnvelope, ShowSummary
from ..utils.validation import is_valid_show_date
from .errors import DecodeError

logger = logging.getLogger(__name__)

SETLIST_REQUIRED_FIELDS = ("set", "song", "venue", "city", "showdate")


def _require_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object envelope, got {type(payload).__name__}"
        )
    return payload


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


def _optional_str(record: dict, key: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    return str(value)


def _optional_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def decode_show_summary(record: Any) -> Optional[ShowSummary]:
    """
    Decode one showyear record.

    Returns:
        The ShowSummary, or None when the record is malformed (not an
        object, missing id/artist, or a date that is not YYYY-MM-DD)
    """
    if not isinstance(record, dict):
        return None

    show_id = _optional_int(record.get("showid"))
    show_date = record.get("showdate")
    artist_name = record.get("artist_name")

    if show_id is None or not isinstance(artist_name, str):
        return None
    if not is_valid_show_date(show_date):
        return None

    return ShowSummary(
        id=show_id,
        date=show_date,
        artist_name=artist_name,
        venue=_optional_str(record, "venue"),
        city=_optional_str(record, "city"),
        state=_optional_str(record, "state"),
        country=_optional_str(record, "country"),
        tour_name=_optional_str(record, "tour_name"),
    )


def decode_show_list(payload: Any) -> ShowListEnvelope:
    """
    Decode a showyear response body.

    A missing, null, or non-list ``data`` field yields an empty envelope.

    Raises:
        DecodeError: If the body is not a JSON object
    """
    envelope = _require_object(payload)
    data = envelope.get("data")

    if data is None:
        logger.debug("Show list envelope has no data field, treating as empty")
        return ShowListEnvelope(data=[])
    if not isinstance(data, list):
        logger.warning(
            f"Show list data field is {type(data).__name__}, not a list; treating as empty"
        )
        return ShowListEnvelope(data=[])

    shows = []
    skipped = 0
    for index, record in enumerate(data):
        show = decode_show_summary(record)
        if show is None:
            logger.debug(f"Record {index}: malformed show record, skipping: {record!r}")
            skipped += 1
            continue
        shows.append(show)

    if skipped > 0:
        logger.warning(f"Skipped {skipped} malformed show records out of {len(data)}")

    return ShowListEnvelope(data=shows, skipped_records=skipped)


def decode_setlist_item(record: Any, index: int = 0) -> SetlistItem:
    """
    Decode one showdate record.

    Raises:
        DecodeError: If the record is not an object or lacks a required field
    """
    if not isinstance(record, dict):
        raise DecodeError(f"Setlist item {index} is not an object")

    missing = [field for field in SETLIST_REQUIRED_FIELDS if not _is_scalar(record.get(field))]
    if missing:
        raise DecodeError(
            f"Setlist item {index} missing required fields: {', '.join(missing)}"
        )

    return SetlistItem(
        set_label=str(record["set"]),
        song=str(record["song"]),
        venue=str(record["venue"]),
        city=str(record["city"]),
        show_date=str(record["showdate"]),
        trans_mark=_optional_str(record, "trans_mark"),
        song_id=_optional_int(record.get("songid")),
        state=_optional_str(record, "state"),
        permalink=_optional_str(record, "permalink"),
        setlist_notes=_optional_str(record, "setlistnotes"),
    )


def decode_setlist(payload: Any) -> SetlistEnvelope:
    """
    Decode a showdate response body, preserving item order.

    Raises:
        DecodeError: If the envelope or any item has the wrong shape
    """
    envelope = _require_object(payload)
    data = envelope.get("data")

    if not isinstance(data, list):
        raise DecodeError(
            f"Setlist envelope data must be a list, got {type(data).__name__}"
        )

    items = [decode_setlist_item(record, index) for index, record in enumerate(data)]
    return SetlistEnvelope(data=items)
