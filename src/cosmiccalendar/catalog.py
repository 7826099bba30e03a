"""Static body and zoom-level catalogs, plus calendar display names."""

import math

from cosmiccalendar.models import Body, ZoomLevel


class ConfigurationError(Exception):
    """Invalid catalog entry or settings value."""


BODIES: tuple[Body, ...] = (
    Body("Mercury", 19.5, 0.24, 0.0, "#8c7853", 2.5),
    Body("Venus", 36.0, 0.615, math.pi, "#ffc649", 6.0),
    Body("Earth", 50.0, 1.0, 0.0, "#4a90e2", 6.5),
    Body("Mars", 76.0, 1.88, math.pi / 2, "#dc4c3e", 3.5),
    Body("Jupiter", 260.0, 11.86, math.pi, "#c88b3a", 14.0),
    Body("Saturn", 477.0, 29.46, math.pi * 1.5, "#fad5a5", 12.0),
    Body("Uranus", 958.0, 84.01, math.pi / 4, "#4fd0e7", 8.0),
    Body("Neptune", 1506.0, 164.79, math.pi * 0.75, "#4169e1", 7.5),
)

MOON_ORBIT_RADIUS = 15.0  # Around Earth
HOUR_RING_RADIUS = 4.5  # Around the focus body at Day/Clock

LANDING, CENTURY, DECADE, YEAR, QUARTER, MONTH, LUNAR, WEEK, DAY, CLOCK = range(10)

ZOOM_LEVELS: tuple[ZoomLevel, ...] = (
    ZoomLevel(LANDING, "LANDING", "", 0.0, "none", 0.0, 0.0),
    ZoomLevel(CENTURY, "CENTURY", "100 years", 100.0, "sun", 10000.0, 5000.0),
    ZoomLevel(DECADE, "DECADE", "10 years", 10.0, "sun", 800.0, 1600.0),
    ZoomLevel(YEAR, "YEAR", "1 year", 1.0, "sun", 350.0, 800.0),
    ZoomLevel(QUARTER, "QUARTER", "3 months", 0.25, "earth", 200.0, 400.0),
    ZoomLevel(MONTH, "MONTH", "1 month", 0.0833, "earth", 70.0, 300.0),
    ZoomLevel(LUNAR, "LUNAR CYCLE", "28 days", 0.0767, "earth", 80.0, 240.0),
    ZoomLevel(WEEK, "WEEK", "1 week", 0.0192, "earth", 25.0, 200.0),
    ZoomLevel(DAY, "DAY", "1 day", 0.00274, "earth", 40.0, 160.0),
    ZoomLevel(CLOCK, "CLOCK", "24 hours", 0.00274, "earth", 25.0, 160.0, is_polar=True),
)

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip
MONTH_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)
DAY_NAMES: tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)  # fmt: skip
DAY_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in DAY_NAMES)
QUARTER_NAMES: tuple[str, ...] = ("Q1", "Q2", "Q3", "Q4")


def validate_bodies(bodies: tuple[Body, ...]) -> None:
    """Reject bodies whose orbital period would divide by zero.

    Raises:
        ConfigurationError: If any period is not strictly positive.
    """
    for body in bodies:
        if not body.orbital_period_years > 0:
            raise ConfigurationError(
                f"{body.name}: orbital period must be > 0, got {body.orbital_period_years}"
            )


def zoom_level(index: int) -> ZoomLevel:
    """Look up a zoom level by index. Raises KeyError when out of range."""
    if not 0 <= index < len(ZOOM_LEVELS):
        raise KeyError(f"no zoom level {index}")
    return ZOOM_LEVELS[index]


def body(name: str) -> Body:
    for b in BODIES:
        if b.name == name:
            return b
    raise KeyError(name)


validate_bodies(BODIES)
