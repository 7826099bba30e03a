import unittest
from datetime import datetime, timedelta

from cosmiccalendar.height import height_for_date, height_for_datetime, height_for_year


class TestHeightProjection(unittest.TestCase):
    def test_anchor_points(self) -> None:
        self.assertEqual(height_for_date(2000, 0, 1, 0), 0.0)
        self.assertEqual(height_for_date(2001, 0, 1, 0), 100.0)
        self.assertEqual(height_for_date(1999, 0, 1, 0), -100.0)
        self.assertEqual(height_for_year(2025), 2500.0)

    def test_mid_year(self) -> None:
        # Months are 0-based: July 1 is exactly half way, June 1 is five twelfths
        self.assertAlmostEqual(height_for_date(2000, 6, 1, 0), 50.0)
        self.assertAlmostEqual(height_for_date(2000, 5, 1, 0), 500 / 12)

    def test_datetime_includes_minutes(self) -> None:
        expected = (12.5 / (24 * 31)) / 12 * 100
        self.assertAlmostEqual(height_for_datetime(datetime(2000, 1, 1, 12, 30)), expected)

    def test_datetime_matches_date_path(self) -> None:
        dt = datetime(2024, 2, 29, 18, 0)
        self.assertEqual(height_for_datetime(dt), height_for_date(2024, 1, 29, 18))

    def test_strictly_monotonic_hour_by_hour(self) -> None:
        for start in (datetime(1999, 12, 20), datetime(2024, 1, 25), datetime(2100, 2, 20)):
            previous = None
            for i in range(24 * 45):
                dt = start + timedelta(hours=i)
                h = height_for_datetime(dt)
                if previous is not None:
                    with self.subTest(dt=dt):
                        self.assertGreater(h, previous)
                previous = h

    def test_last_hour_of_month_below_next_month(self) -> None:
        for year in (2023, 2024):
            for month in range(11):
                dim = (31, 29 if year == 2024 else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30)[month]
                with self.subTest(year=year, month=month):
                    self.assertLess(
                        height_for_date(year, month, dim, 23),
                        height_for_date(year, month + 1, 1, 0),
                    )


if __name__ == "__main__":
    unittest.main(verbosity=2)
