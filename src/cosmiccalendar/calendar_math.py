"""Gregorian calendar helpers shared by navigation, height projection and markers.

Months are 0-based (0 = January) everywhere in this module, matching the
height projection. Weeks start on Sunday; day_in_week 0 = Sunday.
"""

import math
from datetime import date, datetime, timedelta

# Reference new moon used to anchor the lunar cycle grid and the phase estimate
LUNAR_EPOCH = datetime(2000, 1, 6, 18, 14)
SYNODIC_MONTH_DAYS = 29.53059
LUNAR_CYCLE_DAYS = 28  # Display cycle: exactly four Sunday-aligned weeks

# Selectable years; week grids around them stay inside datetime.min..datetime.max
MIN_YEAR = 2
MAX_YEAR = 9998

MOON_PHASE_NAMES: tuple[str, ...] = (
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
)


def is_leap_year(year: int) -> bool:
    """Gregorian leap rule: every 4th year, except centuries not divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a 0-based month."""
    year, month = normalize_month(year, month)
    if month == 1:
        return 29 if is_leap_year(year) else 28
    return (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)[month]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Fold an out-of-range 0-based month into (year, 0..11)."""
    return year + month // 12, month % 12


def add_months(year: int, month: int, delta: int) -> tuple[int, int]:
    return normalize_month(year, month + delta)


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp day to [1, days_in_month] so a date can always be constructed."""
    return max(1, min(day, days_in_month(year, month)))


def quarter_of(month: int) -> int:
    return month // 3


def day_in_week(d: date) -> int:
    """0 = Sunday ... 6 = Saturday (datetime uses 0 = Monday)."""
    return (d.weekday() + 1) % 7


def day_of_year(d: date) -> int:
    """0-based day index within the year (Jan 1 = 0)."""
    return (date(d.year, d.month, d.day) - date(d.year, 1, 1)).days


def sunday_on_or_before(d: datetime) -> datetime:
    """Midnight of the Sunday starting d's week."""
    start = d - timedelta(days=day_in_week(d))
    return datetime(start.year, start.month, start.day)


def month_grid_start(year: int, month: int) -> datetime:
    """First Sunday on or before the 1st of the month."""
    year, month = normalize_month(year, month)
    return sunday_on_or_before(datetime(year, month + 1, 1))


def week_in_month(d: datetime) -> int:
    """Index of d's week within its month grid, clamped to [0, 5]."""
    start = month_grid_start(d.year, d.month - 1)
    day = datetime(d.year, d.month, d.day)
    return max(0, min(5, (day - start).days // 7))


def month_week_grid(year: int, month: int) -> list[datetime]:
    """Sundays of every week intersecting the month, in order.

    Together the weeks cover each day 1..days_in_month exactly once.
    """
    year, month = normalize_month(year, month)
    start = month_grid_start(year, month)
    last = datetime(year, month + 1, days_in_month(year, month))
    weeks = []
    week = start
    while week <= last:
        weeks.append(week)
        week += timedelta(days=7)
    return weeks


def lunar_grid_epoch() -> datetime:
    return sunday_on_or_before(LUNAR_EPOCH)


def lunar_cycle_index(d: datetime) -> int:
    """Index of the 28-day display cycle containing d (negative before 2000)."""
    return (d - lunar_grid_epoch()).days // LUNAR_CYCLE_DAYS


def lunar_week_in_cycle(d: datetime) -> int:
    """Week (0..3) of d inside its 28-day display cycle."""
    return ((d - lunar_grid_epoch()).days // 7) % 4


def lunar_cycle_start(index: int) -> datetime:
    return lunar_grid_epoch() + timedelta(days=LUNAR_CYCLE_DAYS * index)


def moon_phase_fraction(d: datetime) -> float:
    """Fraction of the synodic month elapsed at d, in [0, 1). 0 = new moon."""
    days = (d - LUNAR_EPOCH).total_seconds() / 86400.0
    return (days / SYNODIC_MONTH_DAYS) % 1.0


def moon_phase_name(d: datetime) -> str:
    """Nearest of the eight named phases for d."""
    index = math.floor(moon_phase_fraction(d) * 8 + 0.5) % 8
    return MOON_PHASE_NAMES[index]


def clamp_to_supported(d: datetime) -> datetime:
    """Pull d into MIN_YEAR..MAX_YEAR, keeping its time of day."""
    if d.year < MIN_YEAR:
        return datetime(MIN_YEAR, 1, 1, d.hour, d.minute)
    if d.year > MAX_YEAR:
        return datetime(MAX_YEAR, 12, 31, d.hour, d.minute)
    return d
