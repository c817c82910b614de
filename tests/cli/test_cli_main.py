#!/usr/bin/env python3
"""
Tests for the command line front end.
"""

import io
import os
from datetime import date
import unittest
from argparse import Namespace
from contextlib import redirect_stdout
from unittest.mock import patch

import httpx

from phish_setlists.api import PhishNetGateway
from phish_setlists.cli import create_argument_parser, main
from phish_setlists.cli.main import resolve_setlist_date
from phish_setlists.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_DECODE_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_TRANSPORT_ERROR,
)

SHOWS_2025 = {
    "error": False,
    "data": [
        {"showid": 1, "showdate": "2025-06-28", "artist_name": "Phish", "venue": "Alpine Valley Music Theatre",
         "city": "East Troy", "state": "WI", "tour_name": "2025 Summer Tour"},
        {"showid": 2, "showdate": "2025-06-28", "artist_name": "Goose"},
        {"showid": 3, "showdate": "2025-06-20", "artist_name": "phish"},
        {"showid": 4, "showdate": "2025-07-27", "artist_name": "Phish", "venue": "Broadview Stage at SPAC",
         "tour_name": "2025 Summer Tour"},
    ],
}

SETLIST = {
    "error": False,
    "data": [
        {"set": "2", "song": "Tweezer", "trans_mark": "→", "venue": "Alpine Valley Music Theatre",
         "city": "East Troy", "showdate": "2025-06-28",
         "permalink": "phish-june-28-2025-alpine-valley-music-theatre-east-troy-wi-usa"},
        {"set": "2", "song": "Mike's Song", "trans_mark": "", "venue": "Alpine Valley Music Theatre",
         "city": "East Troy", "showdate": "2025-06-28"},
    ],
}


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/showyear/2025.json"):
        return httpx.Response(200, json=SHOWS_2025)
    if request.url.path.endswith("/showdate/2025-06-28.json"):
        return httpx.Response(200, json=SETLIST)
    return httpx.Response(200, json={"error": False, "data": []})


@patch.dict(os.environ, {"PHISHNET_API_KEY": "test_key"}, clear=True)
@patch("phish_setlists.config.loader._load_from_dotenv_file")
class TestCliMain(unittest.TestCase):
    """Test cases for running subcommands end to end against a mock transport."""

    def _run(self, argv, handler=_handler):
        gateway = PhishNetGateway(
            api_key="test_key",
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        out = io.StringIO()
        with patch.object(PhishNetGateway, "from_env", return_value=gateway), redirect_stdout(out):
            main(argv)
        return out.getvalue().splitlines()

    def test_days_pads_month(self, mock_dotenv):
        self.assertEqual(self._run(["days", "--year", "2025", "--month", "6"]), ["20", "28"])

    def test_months(self, mock_dotenv):
        self.assertEqual(self._run(["months", "--year", "2025"]), ["06", "07"])

    def test_setlist_by_date(self, mock_dotenv):
        self.assertEqual(self._run(["setlist", "--date", "2025-06-28"]), ["Tweezer →", "Mike's Song"])

    def test_setlist_by_parts(self, mock_dotenv):
        lines = self._run(["setlist", "--year", "2025", "--month", "6", "--day", "28"])
        self.assertEqual(lines, ["Tweezer →", "Mike's Song"])

    def test_setlist_link(self, mock_dotenv):
        lines = self._run(["setlist", "--date", "2025-06-28", "--link"])
        self.assertEqual(lines, [
            "Tweezer →",
            "Mike's Song",
            "https://phish.net/setlists/phish-june-28-2025-alpine-valley-music-theatre-east-troy-wi-usa.html",
        ])

    def test_tour(self, mock_dotenv):
        lines = self._run(["tour", "--year", "2025", "--tour", "2025 Summer Tour"])
        self.assertEqual(lines, [
            "2025-06-28 Alpine Valley Music Theatre, East Troy, WI",
            "2025-07-27 Broadview Stage at SPAC",
        ])

    def test_unknown_tour_prints_nothing(self, mock_dotenv):
        self.assertEqual(self._run(["tour", "--year", "2025", "--tour", "1997 Fall Tour"]), [])

    @patch.dict(os.environ, {}, clear=True)
    def test_years_needs_no_api_key(self, mock_dotenv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["years"])
        years = out.getvalue().splitlines()
        self.assertEqual(years[0], str(date.today().year))
        self.assertEqual(years[-1], "1983")
        self.assertNotIn("2006", years)

    def test_empty_setlist_prints_nothing(self, mock_dotenv):
        self.assertEqual(self._run(["setlist", "--date", "2030-01-01"]), [])

    def test_transport_error_exit_code(self, mock_dotenv):
        def failing(request):
            raise httpx.ConnectError("offline", request=request)

        with self.assertRaises(SystemExit) as cm:
            self._run(["days", "--year", "2025", "--month", "06"], handler=failing)
        self.assertEqual(cm.exception.code, EXIT_TRANSPORT_ERROR)

    def test_decode_error_exit_code(self, mock_dotenv):
        with self.assertRaises(SystemExit) as cm:
            self._run(
                ["setlist", "--date", "2025-06-28"],
                handler=lambda request: httpx.Response(200, text="not json"),
            )
        self.assertEqual(cm.exception.code, EXIT_DECODE_ERROR)

    def test_bad_month_exit_code(self, mock_dotenv):
        with self.assertRaises(SystemExit) as cm:
            self._run(["days", "--year", "2025", "--month", "june"])
        self.assertEqual(cm.exception.code, EXIT_INPUT_ERROR)

    def test_bad_year_exit_code(self, mock_dotenv):
        with self.assertRaises(SystemExit) as cm:
            self._run(["months", "--year", "25"])
        self.assertEqual(cm.exception.code, EXIT_INPUT_ERROR)

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_api_key_exit_code(self, mock_dotenv):
        with self.assertRaises(SystemExit) as cm:
            main(["days", "--year", "2025", "--month", "06"])
        self.assertEqual(cm.exception.code, EXIT_CONFIG_ERROR)


class TestResolveSetlistDate(unittest.TestCase):

    def _args(self, **kwargs):
        defaults = {"date": None, "year": None, "month": None, "day": None}
        defaults.update(kwargs)
        return Namespace(**defaults)

    def test_explicit_date(self):
        self.assertEqual(resolve_setlist_date(self._args(date="1997-11-17")), "1997-11-17")

    def test_parts_are_padded(self):
        self.assertEqual(resolve_setlist_date(self._args(year="1997", month="11", day="7")), "1997-11-07")

    def test_invalid_inputs(self):
        for args in (
            self._args(date="1997-11-7"),
            self._args(year="1997", month="11"),
            self._args(year="1997", month="13", day="1"),
            self._args(year="97", month="11", day="17"),
        ):
            with self.assertRaises(ValueError):
                resolve_setlist_date(args)


class TestArgumentParser(unittest.TestCase):

    def test_global_options_before_command(self):
        args = create_argument_parser().parse_args(["--artist", "Goose", "--verbose", "latest"])
        self.assertEqual(args.artist, "Goose")
        self.assertTrue(args.verbose)
        self.assertEqual(args.command, "latest")

    def test_command_required(self):
        with redirect_stdout(io.StringIO()), patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                create_argument_parser().parse_args([])


if __name__ == "__main__":
    unittest.main()
