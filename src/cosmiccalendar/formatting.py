"""Human-readable labels for the selected datetime at each zoom level."""

from datetime import datetime, timedelta

from cosmiccalendar.calendar_math import (
    day_in_week,
    lunar_cycle_index,
    lunar_cycle_start,
    quarter_of,
    sunday_on_or_before,
)
from cosmiccalendar.catalog import (
    CENTURY,
    DAY,
    DAY_ABBREVIATIONS,
    DECADE,
    LANDING,
    LUNAR,
    MONTH,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    QUARTER,
    QUARTER_NAMES,
    WEEK,
    YEAR,
)


def format_datetime(dt: datetime) -> str:
    """'Dec 9, 2025 14:05'"""
    return f"{MONTH_ABBREVIATIONS[dt.month - 1]} {dt.day}, {dt.year} {dt.hour:02d}:{dt.minute:02d}"


def format_date(dt: datetime) -> str:
    return f"{MONTH_ABBREVIATIONS[dt.month - 1]} {dt.day}, {dt.year}"


def format_selection(dt: datetime, level: int) -> str:
    """Caption for the unit containing dt at a zoom level."""
    if level in (LANDING, CENTURY):
        start = dt.year // 100 * 100
        return f"{start}-{start + 99}"
    if level == DECADE:
        return f"{dt.year // 10 * 10}s"
    if level == YEAR:
        return str(dt.year)
    if level == QUARTER:
        return f"{QUARTER_NAMES[quarter_of(dt.month - 1)]} {dt.year}"
    if level == MONTH:
        return f"{MONTH_NAMES[dt.month - 1]} {dt.year}"
    if level == LUNAR:
        start = lunar_cycle_start(lunar_cycle_index(dt))
        end = start + timedelta(days=27)
        return f"{format_date(start)} - {format_date(end)}"
    if level == WEEK:
        sunday = sunday_on_or_before(dt)
        return f"{format_date(sunday)} - {format_date(sunday + timedelta(days=6))}"
    if level == DAY:
        return f"{DAY_ABBREVIATIONS[day_in_week(dt)]}, {format_date(dt)}"
    return format_datetime(dt)
