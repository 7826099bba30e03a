"""Environment-driven settings. Entry points call load_dotenv() before load_settings()."""

import logging
import os
from dataclasses import dataclass

from pytz import UnknownTimeZoneError, timezone

from cosmiccalendar.catalog import DECADE, ZOOM_LEVELS, ConfigurationError

_THEMES = ("dark", "light")


@dataclass(frozen=True)
class Settings:
    """Validated runtime configuration."""

    tz_name: str  # pytz zone for the wall clock ("Asia/Seoul")
    theme: str  # "dark" | "light"
    start_zoom: int  # Zoom level index shown on launch
    log_level: str  # logging level name ("INFO")


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Read COSMIC_CALENDAR_* variables.

    Args:
        environ: Mapping to read from. os.environ if None.

    Returns:
        Settings with defaults filled in.

    Raises:
        ConfigurationError: On an unknown timezone, theme, zoom level or log level.
    """
    env = os.environ if environ is None else environ

    tz_name = env.get("COSMIC_CALENDAR_TZ", "UTC")
    try:
        timezone(tz_name)
    except UnknownTimeZoneError as e:
        raise ConfigurationError(f"unknown timezone: {tz_name}") from e

    theme = env.get("COSMIC_CALENDAR_THEME", "dark").lower()
    if theme not in _THEMES:
        raise ConfigurationError(f"theme must be one of {_THEMES}, got {theme!r}")

    raw_zoom = env.get("COSMIC_CALENDAR_ZOOM", str(DECADE))
    try:
        start_zoom = int(raw_zoom)
    except ValueError as e:
        raise ConfigurationError(f"zoom must be an integer, got {raw_zoom!r}") from e
    if not 0 <= start_zoom < len(ZOOM_LEVELS):
        raise ConfigurationError(f"zoom must be 0-{len(ZOOM_LEVELS) - 1}, got {start_zoom}")

    log_level = env.get("COSMIC_CALENDAR_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"unknown log level: {log_level}")

    return Settings(tz_name=tz_name, theme=theme, start_zoom=start_zoom, log_level=log_level)
