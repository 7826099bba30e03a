"""Time marker layout: boundary lines, curves and labels per zoom level.

Each zoom level maps to a tuple of sub-layouts in _LAYOUTS; finer levels
compose the coarser ones instead of repeating them. R below is the focus
body's orbital radius; every band is a fraction of it.

Highlight rule, shared by all sub-layouts: a unit equal to the real clock's
unit is ACTUAL_NOW, a unit equal to the navigated unit (and not the actual
one) is USER_SELECTED, everything else is NEUTRAL.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Hashable

import numpy as np

from cosmiccalendar.calendar_math import (
    LUNAR_CYCLE_DAYS,
    MOON_PHASE_NAMES,
    day_in_week,
    days_in_month,
    lunar_cycle_index,
    lunar_cycle_start,
    month_week_grid,
    quarter_of,
    sunday_on_or_before,
)
from cosmiccalendar.catalog import (
    CENTURY,
    CLOCK,
    DAY,
    DAY_ABBREVIATIONS,
    DAY_NAMES,
    DECADE,
    HOUR_RING_RADIUS,
    LANDING,
    LUNAR,
    MONTH,
    MONTH_ABBREVIATIONS,
    MOON_ORBIT_RADIUS,
    QUARTER,
    QUARTER_NAMES,
    WEEK,
    YEAR,
)
from cosmiccalendar.height import height_for_date, height_for_datetime, height_for_year
from cosmiccalendar.models import Body, Highlight, MarkerPrimitive, OrbitalFrame, Point
from cosmiccalendar.orbits import TAU, body_angle, helical_curve, point_at, radial_line

_CURVE_SEGMENTS = 32
_MOON_SEGMENTS = 200
_RING_SEGMENTS = 96
_CONTEXT_OPACITY = 0.3
_MINOR_OPACITY = 0.5


def highlight_for(unit: Hashable, actual: Hashable, selected: Hashable) -> Highlight:
    """Classify a calendar unit against the real and the navigated unit."""
    if unit == actual:
        return Highlight.ACTUAL_NOW
    if unit == selected:
        return Highlight.USER_SELECTED
    return Highlight.NEUTRAL


@dataclass(frozen=True)
class _Layout:
    """Shared geometry helpers bound to one (selected, now, frame, focus) tuple."""

    selected: datetime
    now: datetime
    frame: OrbitalFrame
    focus: Body

    @property
    def radius(self) -> float:
        return self.focus.orbital_radius

    def angle(self, height: float) -> float:
        return body_angle(height, self.focus, self.frame)

    def focus_center(self, height: float) -> tuple[float, float]:
        a = self.angle(height)
        return (math.cos(a) * self.radius, math.sin(a) * self.radius)

    def line(self, inner: float, outer: float, height: float, highlight: Highlight,
             group: str, opacity: float = 1.0) -> MarkerPrimitive:
        points = radial_line(self.angle(height), inner, outer, height)
        return MarkerPrimitive("boundary_line", highlight, points, group, opacity=opacity)

    def curve(self, radius: float, start: float, end: float, highlight: Highlight,
              group: str) -> MarkerPrimitive:
        arc = helical_curve(
            start,
            end,
            radius,
            self.frame.reference_height,
            self.focus.orbital_period_years,
            self.frame.phase(self.focus.name),
            _CURVE_SEGMENTS,
        )
        return MarkerPrimitive("boundary_curve", highlight, _points(arc), group)

    def label(self, text: str, radius: float, height: float, highlight: Highlight,
              group: str, opacity: float = 1.0) -> MarkerPrimitive:
        anchor = point_at(self.angle(height), radius, height)
        return MarkerPrimitive("label", highlight, (anchor,), group, text=text, opacity=opacity)


def _points(arr: np.ndarray) -> tuple[Point, ...]:
    return tuple((float(x), float(y), float(z)) for x, y, z in arr)


def _month_height(year: int, month: int, day: float = 1.0) -> float:
    return height_for_date(year + month // 12, month % 12, day)


def _month_key(dt: datetime) -> tuple[int, int]:
    return (dt.year, dt.month - 1)


def _quarter_key(dt: datetime) -> tuple[int, int]:
    return (dt.year, quarter_of(dt.month - 1))


def _day(dt: datetime) -> datetime:
    return datetime(dt.year, dt.month, dt.day)


# --- Century / Decade ---


def _year_ticks(ly: _Layout, window_start: int, span: int, major_every: int,
                group: str) -> list[MarkerPrimitive]:
    r = ly.radius
    out: list[MarkerPrimitive] = []
    for year in range(window_start, window_start + span + 1):
        h = height_for_year(year)
        if (year - window_start) % major_every == 0:
            # Major ticks stand for the unit they open (a decade at century view)
            unit = year // major_every
            hl = highlight_for(unit, ly.now.year // major_every, ly.selected.year // major_every)
            out.append(ly.line(0.0, r, h, hl, group))
            out.append(ly.label(str(year), r * 1.1, h, hl, group))
        else:
            hl = highlight_for(year, ly.now.year, ly.selected.year)
            out.append(ly.line(r * 0.8, r, h, hl, group, opacity=_MINOR_OPACITY))
    for year in (window_start - span, window_start + 2 * span):
        h = height_for_year(year)
        out.append(ly.line(0.0, r, h, Highlight.NEUTRAL, group, opacity=_CONTEXT_OPACITY))
        out.append(ly.label(str(year), r * 1.1, h, Highlight.NEUTRAL, group,
                            opacity=_CONTEXT_OPACITY))
    return out


def _century(ly: _Layout) -> list[MarkerPrimitive]:
    return _year_ticks(ly, ly.selected.year // 100 * 100, 100, 10, "century")


def _decade(ly: _Layout) -> list[MarkerPrimitive]:
    return _year_ticks(ly, ly.selected.year // 10 * 10, 10, 1, "decade")


# --- Year ---


def _month_divider(ly: _Layout, year: int, month: int) -> list[MarkerPrimitive]:
    r = ly.radius
    hl = highlight_for((year, month), _month_key(ly.now), _month_key(ly.selected))
    start = _month_height(year, month)
    mid = _month_height(year, month, days_in_month(year, month) / 2 + 1)
    return [
        ly.line(0.0, r, start, hl, "year"),
        ly.curve(r / 2, start, _month_height(year, month + 1), hl, "year"),
        ly.label(MONTH_ABBREVIATIONS[month], r * 3 / 4, mid, hl, "year"),
    ]


def _year(ly: _Layout) -> list[MarkerPrimitive]:
    r = ly.radius
    year = ly.selected.year
    out: list[MarkerPrimitive] = []
    for month in range(12):
        out.extend(_month_divider(ly, year, month))
    for quarter in range(4):
        hl = highlight_for((year, quarter), _quarter_key(ly.now), _quarter_key(ly.selected))
        mid = (_month_height(year, quarter * 3) + _month_height(year, quarter * 3 + 3)) / 2
        out.append(ly.label(QUARTER_NAMES[quarter], r / 4, mid, hl, "year"))
    if ly.now.year != year:
        out.extend(_month_divider(ly, ly.now.year, ly.now.month - 1))
    out.append(ly.label(str(year), r * 1.1, height_for_year(year), Highlight.NEUTRAL, "year"))
    return out


# --- Quarter (shared by every finer level) ---


def _week_tick_index(dt: datetime) -> int:
    """Which of the four per-month week ticks dt falls after."""
    dim = days_in_month(dt.year, dt.month - 1)
    return min(3, (dt.day - 1) * 4 // dim)


def _quarter(ly: _Layout) -> list[MarkerPrimitive]:
    r = ly.radius
    actual_q, selected_q = _quarter_key(ly.now), _quarter_key(ly.selected)
    actual_m, selected_m = _month_key(ly.now), _month_key(ly.selected)
    actual_w = actual_m + (_week_tick_index(ly.now),)
    selected_w = selected_m + (_week_tick_index(ly.selected),)

    out: list[MarkerPrimitive] = []
    for year, quarter in dict.fromkeys((selected_q, actual_q)):
        hl = highlight_for((year, quarter), actual_q, selected_q)
        first = quarter * 3
        start, end = _month_height(year, first), _month_height(year, first + 3)
        out.append(ly.line(0.0, r / 3, start, hl, "quarter"))
        out.append(ly.line(0.0, r / 3, end, hl, "quarter"))
        out.append(ly.curve(r / 3, start, end, hl, "quarter"))
        out.append(ly.label(f"{QUARTER_NAMES[quarter]} {year}", r / 6, (start + end) / 2, hl,
                            "quarter"))

        for month in range(first, first + 3):
            mhl = highlight_for((year, month), actual_m, selected_m)
            dim = days_in_month(year, month)
            m_start, m_end = _month_height(year, month), _month_height(year, month + 1)
            out.append(ly.line(r / 3, r * 2 / 3, m_start, mhl, "quarter"))
            out.append(ly.curve(r * 2 / 3, m_start, m_end, mhl, "quarter"))
            out.append(ly.label(MONTH_ABBREVIATIONS[month], r / 2, (m_start + m_end) / 2, mhl,
                                "quarter"))
            for j in range(4):
                whl = highlight_for((year, month, j), actual_w, selected_w)
                h = height_for_date(year, month, 1 + j * dim / 4)
                out.append(ly.line(r * 0.9, r, h, whl, "quarter"))
    return out


# --- Month week grid (Month, Week, Day, Clock) ---


def _month_grid(ly: _Layout) -> list[MarkerPrimitive]:
    r = ly.radius
    actual_week, selected_week = sunday_on_or_before(ly.now), sunday_on_or_before(ly.selected)
    actual_day, selected_day = _day(ly.now), _day(ly.selected)

    weeks: dict[datetime, None] = {}
    days: dict[datetime, None] = {}
    for year, month in dict.fromkeys((_month_key(ly.selected), _month_key(ly.now))):
        weeks.update(dict.fromkeys(month_week_grid(year, month)))
        days.update(
            dict.fromkeys(datetime(year, month + 1, d) for d in range(1, days_in_month(year, month) + 1))
        )

    out: list[MarkerPrimitive] = []
    for sunday in weeks:
        hl = highlight_for(sunday, actual_week, selected_week)
        saturday = sunday + timedelta(days=6)
        start = height_for_datetime(sunday)
        end = height_for_datetime(sunday + timedelta(days=7))
        mid = height_for_datetime(sunday + timedelta(days=3.5))
        out.append(ly.line(r * 2 / 3, r * 5 / 6, start, hl, "month"))
        out.append(ly.curve(r * 5 / 6, start, end, hl, "month"))
        out.append(ly.label(f"{sunday.day}-{saturday.day}", r * 3 / 4, mid, hl, "month"))
    for day in days:
        hl = highlight_for(day, actual_day, selected_day)
        out.append(ly.line(r * 0.95, r, height_for_datetime(day), hl, "month"))
        noon = height_for_datetime(day + timedelta(hours=12))
        out.append(ly.label(str(day.day), r * 0.9, noon, hl, "month"))
    return out


# --- Lunar cycle ---


def moon_position(t: datetime, cycle_start: datetime, frame: OrbitalFrame, earth: Body) -> Point:
    """Synthetic moon around Earth: new moon toward the Sun at the cycle start."""
    h = height_for_datetime(t)
    sun_to_earth = body_angle(h, earth, frame)
    phase = (t - cycle_start).total_seconds() / 86400.0 / LUNAR_CYCLE_DAYS
    ex, ez = math.cos(sun_to_earth) * earth.orbital_radius, math.sin(sun_to_earth) * earth.orbital_radius
    return point_at(sun_to_earth + math.pi - phase * TAU, MOON_ORBIT_RADIUS, h, (ex, ez))


def moon_worldline(cycle_index: int, frame: OrbitalFrame, earth: Body,
                   segments: int = _MOON_SEGMENTS) -> np.ndarray:
    """Moon path over one 28-day display cycle, shape (segments + 1, 3)."""
    start = lunar_cycle_start(cycle_index)
    step = timedelta(days=LUNAR_CYCLE_DAYS) / segments
    return np.array([moon_position(start + step * i, start, frame, earth) for i in range(segments + 1)])


def _lunar(ly: _Layout) -> list[MarkerPrimitive]:
    actual_c, selected_c = lunar_cycle_index(ly.now), lunar_cycle_index(ly.selected)
    actual_day, selected_day = _day(ly.now), _day(ly.selected)
    out: list[MarkerPrimitive] = []
    for cycle in dict.fromkeys((selected_c, actual_c)):
        hl = highlight_for(cycle, actual_c, selected_c)
        start = lunar_cycle_start(cycle)
        path = moon_worldline(cycle, ly.frame, ly.focus)
        out.append(MarkerPrimitive("boundary_curve", hl, _points(path), "lunar"))
        for k, name in enumerate(MOON_PHASE_NAMES):
            t = start + timedelta(days=3.5 * k)
            anchor = moon_position(t, start, ly.frame, ly.focus)
            out.append(MarkerPrimitive("label", hl, (anchor,), "lunar", text=name))
        for d in range(LUNAR_CYCLE_DAYS):
            day = start + timedelta(days=d)
            dhl = highlight_for(day, actual_day, selected_day)
            h = height_for_datetime(day)
            mx, _, mz = moon_position(day, start, ly.frame, ly.focus)
            cx, cz = ly.focus_center(h)
            angle = math.atan2(mz - cz, mx - cx)
            points = radial_line(angle, MOON_ORBIT_RADIUS * 0.9, MOON_ORBIT_RADIUS, h, (cx, cz))
            out.append(MarkerPrimitive("boundary_line", dhl, points, "lunar"))
    return out


# --- Week days ---


def _week_days(ly: _Layout) -> list[MarkerPrimitive]:
    r = ly.radius
    actual_day, selected_day = _day(ly.now), _day(ly.selected)
    sunday = sunday_on_or_before(ly.selected)
    days = dict.fromkeys([sunday + timedelta(days=i) for i in range(7)] + [actual_day])
    out: list[MarkerPrimitive] = []
    for day in days:
        hl = highlight_for(day, actual_day, selected_day)
        dow = day_in_week(day)
        text = DAY_ABBREVIATIONS[dow] if hl is Highlight.NEUTRAL else DAY_NAMES[dow]
        out.append(ly.line(r * 5 / 6, r, height_for_datetime(day), hl, "week"))
        noon = height_for_datetime(day + timedelta(hours=12))
        out.append(ly.label(text, r * 11 / 12, noon, hl, "week"))
    return out


# --- Hour ring (Day, Clock) ---


def hour_ring_point(day: datetime, hour: float, frame: OrbitalFrame, focus: Body,
                    radius: float = HOUR_RING_RADIUS) -> Point:
    """Point on the hour ring; midnight faces away from the Sun, noon toward it."""
    h = height_for_datetime(day + timedelta(hours=hour))
    sun_to_body = body_angle(h, focus, frame)
    center = (math.cos(sun_to_body) * focus.orbital_radius, math.sin(sun_to_body) * focus.orbital_radius)
    return point_at(sun_to_body - TAU * hour / 24, radius, h, center)


def _hour_ring(ly: _Layout) -> list[MarkerPrimitive]:
    day = _day(ly.selected)
    actual_block = (_day(ly.now), ly.now.hour // 3)
    selected_block = (day, ly.selected.hour // 3)
    ring = tuple(
        hour_ring_point(day, 24 * i / _RING_SEGMENTS, ly.frame, ly.focus)
        for i in range(_RING_SEGMENTS + 1)
    )
    out = [MarkerPrimitive("boundary_curve", Highlight.NEUTRAL, ring, "hour_ring")]
    for hour in range(0, 24, 3):
        hl = highlight_for((day, hour // 3), actual_block, selected_block)
        inner = hour_ring_point(day, hour, ly.frame, ly.focus, HOUR_RING_RADIUS * 0.8)
        outer = hour_ring_point(day, hour, ly.frame, ly.focus)
        out.append(MarkerPrimitive("boundary_line", hl, (inner, outer), "hour_ring"))
        anchor = hour_ring_point(day, hour, ly.frame, ly.focus, HOUR_RING_RADIUS * 1.2)
        out.append(MarkerPrimitive("label", hl, (anchor,), "hour_ring", text=f"{hour:02d}"))

    hour = ly.selected.hour + ly.selected.minute / 60
    h = height_for_datetime(ly.selected)
    cx, cz = ly.focus_center(h)
    hand_hl = highlight_for(selected_block, actual_block, selected_block)
    tip = hour_ring_point(day, hour, ly.frame, ly.focus)
    out.append(MarkerPrimitive("boundary_line", hand_hl, ((cx, h, cz), tip), "hour_hand"))
    return out


_LAYOUTS: dict[int, tuple[Callable[[_Layout], list[MarkerPrimitive]], ...]] = {
    LANDING: (),
    CENTURY: (_century,),
    DECADE: (_decade,),
    YEAR: (_year,),
    QUARTER: (_quarter,),
    MONTH: (_quarter, _month_grid),
    LUNAR: (_quarter, _lunar),
    WEEK: (_quarter, _month_grid, _week_days),
    DAY: (_quarter, _month_grid, _week_days, _hour_ring),
    CLOCK: (_quarter, _month_grid, _week_days, _hour_ring),
}


def layout_markers(level: int, selected: datetime, now: datetime, frame: OrbitalFrame,
                   focus: Body) -> tuple[MarkerPrimitive, ...]:
    """Generate every marker for a zoom level.

    Args:
        level: Zoom level index.
        selected: Decoded navigated datetime.
        now: Real clock.
        frame: Orbital phase frame shared with the body geometry.
        focus: Body whose orbit the bands are measured against (Earth).

    Returns:
        Markers in drawing order, coarser sub-layouts first.
    """
    ly = _Layout(selected, now, frame, focus)
    out: list[MarkerPrimitive] = []
    for sub_layout in _LAYOUTS[level]:
        out.extend(sub_layout(ly))
    return tuple(out)
