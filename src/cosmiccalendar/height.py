"""Calendar date → vertical height along the time axis.

100 height units = 1 year; height 0 = Jan 1, 2000 00:00.
"""

from datetime import datetime

from cosmiccalendar.calendar_math import days_in_month

HEIGHT_PER_YEAR = 100.0
EPOCH_YEAR = 2000


def height_for_date(year: int, month: int, day: int, hour: float = 0.0) -> float:
    """Map a calendar date to a height.

    Args:
        year: Gregorian year.
        month: 0-based month (0 = January).
        day: 1-based day of month.
        hour: Hour of day, may be fractional (minutes / 60).

    Returns:
        (year - 2000) * 100 plus the progress through the year * 100.
    """
    dim = days_in_month(year, month)
    year_progress = (month + (day - 1) / dim + hour / (24 * dim)) / 12
    return (year - EPOCH_YEAR) * HEIGHT_PER_YEAR + year_progress * HEIGHT_PER_YEAR


def height_for_datetime(dt: datetime) -> float:
    """Height of a datetime, with minute precision."""
    return height_for_date(dt.year, dt.month - 1, dt.day, dt.hour + dt.minute / 60)


def height_for_year(year: int) -> float:
    """Height of Jan 1 00:00 of year."""
    return (year - EPOCH_YEAR) * HEIGHT_PER_YEAR
