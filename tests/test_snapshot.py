import argparse
import contextlib
import io
import unittest
from datetime import datetime

from cosmiccalendar.calendar_math import MAX_YEAR, MIN_YEAR
from cosmiccalendar.snapshot import _parse_when, build_parser


class TestParseWhen(unittest.TestCase):
    def test_accepts_supported_edges(self) -> None:
        self.assertEqual(_parse_when(f"000{MIN_YEAR}-01-01 00:00"), datetime(MIN_YEAR, 1, 1))
        self.assertEqual(_parse_when(f"{MAX_YEAR}-12-31 23:59"), datetime(MAX_YEAR, 12, 31, 23, 59))

    def test_rejects_years_outside_range(self) -> None:
        for value in ("0001-01-03 00:00", "9999-12-20 12:00"):
            with self.subTest(value=value), self.assertRaises(argparse.ArgumentTypeError):
                _parse_when(value)

    def test_rejects_bad_format(self) -> None:
        with self.assertRaises(argparse.ArgumentTypeError):
            _parse_when("2025/12/09")

    def test_parser_exits_on_out_of_range_date(self) -> None:
        parser = build_parser(2)
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            parser.parse_args(["--date", "9999-12-20 12:00"])
        self.assertEqual(parser.parse_args(["--date", "2025-12-09 14:05"]).date,
                         datetime(2025, 12, 9, 14, 5))


if __name__ == "__main__":
    unittest.main(verbosity=2)
