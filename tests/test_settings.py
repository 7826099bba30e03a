import unittest
from datetime import datetime, timedelta

from cosmiccalendar.catalog import CLOCK, DAY, DECADE, LUNAR, MONTH, QUARTER, WEEK, YEAR, ConfigurationError
from cosmiccalendar.clock import current_time
from cosmiccalendar.formatting import format_datetime, format_selection
from cosmiccalendar.i18n import t, zoom_name
from cosmiccalendar.settings import load_settings
from cosmiccalendar.theme import DARK, LIGHT, palette
from cosmiccalendar.models import Highlight


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = load_settings({})
        self.assertEqual(settings.tz_name, "UTC")
        self.assertEqual(settings.theme, "dark")
        self.assertEqual(settings.start_zoom, DECADE)
        self.assertEqual(settings.log_level, "INFO")

    def test_overrides(self) -> None:
        settings = load_settings(
            {
                "COSMIC_CALENDAR_TZ": "Asia/Seoul",
                "COSMIC_CALENDAR_THEME": "Light",
                "COSMIC_CALENDAR_ZOOM": "9",
                "COSMIC_CALENDAR_LOG_LEVEL": "debug",
            }
        )
        self.assertEqual(settings.tz_name, "Asia/Seoul")
        self.assertEqual(settings.theme, "light")
        self.assertEqual(settings.start_zoom, 9)
        self.assertEqual(settings.log_level, "DEBUG")

    def test_invalid_values(self) -> None:
        for env in (
            {"COSMIC_CALENDAR_TZ": "Mars/Olympus"},
            {"COSMIC_CALENDAR_THEME": "sepia"},
            {"COSMIC_CALENDAR_ZOOM": "12"},
            {"COSMIC_CALENDAR_ZOOM": "year"},
            {"COSMIC_CALENDAR_LOG_LEVEL": "LOUD"},
        ):
            with self.subTest(env=env):
                with self.assertRaises(ConfigurationError):
                    load_settings(env)


class TestClock(unittest.TestCase):
    def test_current_time_is_naive_and_minute_precise(self) -> None:
        now = current_time("Asia/Seoul")
        self.assertIsNone(now.tzinfo)
        self.assertEqual((now.second, now.microsecond), (0, 0))
        self.assertLess(abs(now - datetime.now().replace(tzinfo=None)), timedelta(days=1))


class TestFormatting(unittest.TestCase):
    def test_format_datetime(self) -> None:
        self.assertEqual(format_datetime(datetime(2025, 12, 9, 14, 5)), "Dec 9, 2025 14:05")

    def test_format_selection(self) -> None:
        dt = datetime(2025, 12, 9, 14, 5)
        self.assertEqual(format_selection(dt, DECADE), "2020s")
        self.assertEqual(format_selection(dt, YEAR), "2025")
        self.assertEqual(format_selection(dt, QUARTER), "Q4 2025")
        self.assertEqual(format_selection(dt, MONTH), "December 2025")
        self.assertEqual(format_selection(dt, WEEK), "Dec 7, 2025 - Dec 13, 2025")
        self.assertEqual(format_selection(dt, DAY), "Tue, Dec 9, 2025")
        self.assertEqual(format_selection(dt, CLOCK), "Dec 9, 2025 14:05")
        self.assertIn(" - ", format_selection(dt, LUNAR))


class TestPresentation(unittest.TestCase):
    def test_translation_fallbacks(self) -> None:
        self.assertEqual(t("btn_present", "en"), "⟲ Return to now")
        self.assertEqual(t("btn_present", "fr"), "⟲ Return to now")
        self.assertEqual(t("missing_key", "ko"), "missing_key")
        self.assertEqual(zoom_name("LUNAR CYCLE", "en"), "Lunar Cycle")
        self.assertEqual(zoom_name("YEAR", "ko"), "년")

    def test_palettes(self) -> None:
        self.assertIs(palette("light"), LIGHT)
        self.assertIs(palette("dark"), DARK)
        self.assertEqual(DARK.marker_color(Highlight.ACTUAL_NOW), "#ff0000")
        self.assertEqual(DARK.marker_color(Highlight.USER_SELECTED), "#00ffff")
        self.assertEqual(LIGHT.marker_color(Highlight.USER_SELECTED), "#0066cc")
        self.assertEqual(LIGHT.marker_color(Highlight.NEUTRAL), "#000000")


if __name__ == "__main__":
    unittest.main(verbosity=2)
