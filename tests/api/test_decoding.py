#!/usr/bin/env python3
"""
Tests for decoding Phish.net envelopes into typed records.
"""

import unittest

from phish_setlists.api import DecodeError, decode_setlist, decode_show_list
from phish_setlists.api.decoding import decode_show_summary
from phish_setlists.models import SetlistItem, ShowSummary


def _show_record(**overrides):
    record = {
        "showid": 1718730981,
        "showdate": "2025-06-28",
        "artist_name": "Phish",
        "venue": "Alpine Valley Music Theatre",
        "city": "East Troy",
        "state": "WI",
        "country": "USA",
        "tour_name": "2025 Summer Tour",
    }
    record.update(overrides)
    return record


def _setlist_record(**overrides):
    record = {
        "set": "2",
        "song": "Tweezer",
        "songid": 1034,
        "trans_mark": " -> ",
        "venue": "Alpine Valley Music Theatre",
        "city": "East Troy",
        "state": "WI",
        "showdate": "2025-06-28",
        "permalink": "phish-june-28-2025-alpine-valley-music-theatre-east-troy-wi-usa",
        "setlistnotes": "<p>Tweezer was unfinished.</p>",
    }
    record.update(overrides)
    return record


class TestDecodeShowList(unittest.TestCase):
    """Test cases for the showyear envelope."""

    def test_decodes_all_fields(self):
        envelope = decode_show_list({"error": False, "data": [_show_record()]})

        self.assertEqual(envelope.skipped_records, 0)
        self.assertEqual(
            envelope.data,
            [
                ShowSummary(
                    id=1718730981,
                    date="2025-06-28",
                    artist_name="Phish",
                    venue="Alpine Valley Music Theatre",
                    city="East Troy",
                    state="WI",
                    country="USA",
                    tour_name="2025 Summer Tour",
                )
            ],
        )

    def test_string_show_id_is_converted(self):
        show = decode_show_summary(_show_record(showid="42"))
        self.assertEqual(show.id, 42)

    def test_missing_data_is_empty(self):
        """Test that an envelope without data decodes to no shows."""
        self.assertEqual(decode_show_list({"error": False}).data, [])
        self.assertEqual(decode_show_list({"data": None}).data, [])

    def test_non_list_data_is_empty(self):
        with self.assertLogs("phish_setlists.api.decoding", level="WARNING"):
            envelope = decode_show_list({"data": {"unexpected": True}})
        self.assertEqual(envelope.data, [])

    def test_non_object_body_raises(self):
        with self.assertRaises(DecodeError):
            decode_show_list([_show_record()])
        with self.assertRaises(DecodeError):
            decode_show_list("not json")

    def test_malformed_records_are_skipped(self):
        """Test that bad records are dropped without failing the year."""
        data = [
            _show_record(showdate="2025-06-20"),
            _show_record(showdate="2025-06"),
            _show_record(showdate="June 21 2025"),
            _show_record(showdate="2025-6-22"),
            _show_record(showdate=None),
            _show_record(showid=None),
            _show_record(artist_name=None),
            "not an object",
            _show_record(showdate="2025-06-28"),
        ]

        with self.assertLogs("phish_setlists.api.decoding", level="WARNING") as logs:
            envelope = decode_show_list({"data": data})

        self.assertEqual([s.date for s in envelope.data], ["2025-06-20", "2025-06-28"])
        self.assertEqual(envelope.skipped_records, 7)
        self.assertTrue(any("Skipped 7" in line for line in logs.output))

    def test_order_preserved(self):
        data = [_show_record(showid=i, showdate=f"2025-07-{d:02d}") for i, d in enumerate([9, 1, 5])]
        envelope = decode_show_list({"data": data})
        self.assertEqual([s.id for s in envelope.data], [0, 1, 2])


class TestDecodeSetlist(unittest.TestCase):
    """Test cases for the showdate envelope."""

    def test_decodes_canonical_item(self):
        envelope = decode_setlist({"data": [_setlist_record()]})

        self.assertEqual(
            envelope.data[0],
            SetlistItem(
                set_label="2",
                song="Tweezer",
                venue="Alpine Valley Music Theatre",
                city="East Troy",
                show_date="2025-06-28",
                trans_mark=" -> ",
                song_id=1034,
                state="WI",
                permalink="phish-june-28-2025-alpine-valley-music-theatre-east-troy-wi-usa",
                setlist_notes="<p>Tweezer was unfinished.</p>",
            ),
        )

    def test_optional_fields_may_be_absent(self):
        record = _setlist_record()
        for key in ("songid", "trans_mark", "state", "permalink", "setlistnotes"):
            del record[key]

        item = decode_setlist({"data": [record]}).data[0]

        self.assertIsNone(item.trans_mark)
        self.assertIsNone(item.song_id)
        self.assertIsNone(item.state)

    def test_order_preserved(self):
        songs = ["Wilson", "AC/DC Bag", "Divided Sky", "Ghost"]
        envelope = decode_setlist({"data": [_setlist_record(song=s) for s in songs]})
        self.assertEqual([item.song for item in envelope.data], songs)

    def test_empty_data_is_valid(self):
        self.assertEqual(decode_setlist({"data": []}).data, [])

    def test_missing_data_raises(self):
        with self.assertRaises(DecodeError):
            decode_setlist({"error": False})

    def test_non_list_data_raises(self):
        with self.assertRaises(DecodeError):
            decode_setlist({"data": "Tweezer"})

    def test_non_object_body_raises(self):
        with self.assertRaises(DecodeError):
            decode_setlist([_setlist_record()])

    def test_item_missing_song_raises(self):
        """Test that one malformed item fails the whole setlist."""
        record = _setlist_record()
        del record["song"]
        with self.assertRaises(DecodeError) as cm:
            decode_setlist({"data": [_setlist_record(), record]})
        self.assertIn("song", str(cm.exception))

    def test_item_not_object_raises(self):
        with self.assertRaises(DecodeError):
            decode_setlist({"data": [_setlist_record(), ["Tweezer"]]})


if __name__ == "__main__":
    unittest.main()
