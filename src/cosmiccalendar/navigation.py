"""Navigation state transitions and the state ⇄ datetime codec.

Every function takes the real clock (now) explicitly. The selected datetime
is always decoded fresh from (state, level, now) and never cached.
"""

import logging
import math
from dataclasses import asdict, fields, replace
from datetime import datetime, timedelta

from cosmiccalendar.calendar_math import (
    LUNAR_CYCLE_DAYS,
    add_months,
    clamp_day,
    clamp_to_supported,
    day_in_week,
    lunar_cycle_index,
    lunar_week_in_cycle,
    month_grid_start,
    normalize_month,
    quarter_of,
    sunday_on_or_before,
    week_in_month,
)
from cosmiccalendar.catalog import (
    CENTURY,
    CLOCK,
    DAY,
    DECADE,
    LANDING,
    LUNAR,
    MONTH,
    QUARTER,
    WEEK,
    YEAR,
)
from cosmiccalendar.models import NavigationState

logger = logging.getLogger(__name__)

HOUR_STEP = 3
LUNAR_WEEKS = 4


def _at_time_of(d: datetime, now: datetime) -> datetime:
    return datetime(d.year, d.month, d.day, now.hour, now.minute)


def _in_year_month(year: int, month: int, now: datetime) -> datetime:
    """now's day and time moved into (year, 0-based month), day clamped."""
    year, month = normalize_month(year, month)
    return datetime(year, month + 1, clamp_day(year, month, now.day), now.hour, now.minute)


def decode(state: NavigationState, level: int, now: datetime) -> datetime:
    """Derive the selected datetime from the navigation state at a zoom level.

    Args:
        state: Current navigation offsets and counters.
        level: Active zoom level index.
        now: Real clock, minute precision.

    Returns:
        A valid naive datetime. With all offsets zero and counters at now's
        values this equals now.
    """
    if level in (LANDING, CENTURY, DECADE):
        return _in_year_month(now.year + state.year_offset, now.month - 1, now)
    if level == YEAR:
        return _in_year_month(now.year + state.year_offset, state.month_in_year, now)
    if level == QUARTER:
        absolute = (quarter_of(now.month - 1) + state.quarter_offset) * 3 + state.month_in_quarter
        return _in_year_month(now.year, absolute, now)
    if level == MONTH:
        year, month = add_months(now.year, now.month - 1, state.month_offset)
        start = month_grid_start(year, month)
        days = 7 * state.week_in_month + state.day_in_week
        return _at_time_of(start + timedelta(days=days), now)
    if level == LUNAR:
        weeks = (
            LUNAR_CYCLE_DAYS // 7 * state.lunar_offset
            + state.week_in_month
            - lunar_week_in_cycle(now)
        )
        days = 7 * weeks + state.day_in_week
        return _at_time_of(sunday_on_or_before(now) + timedelta(days=days), now)
    if level == WEEK:
        days = 7 * state.week_offset + state.day_in_week
        return _at_time_of(sunday_on_or_before(now) + timedelta(days=days), now)
    if level in (DAY, CLOCK):
        base = datetime(now.year, now.month, now.day, state.hour_in_day, now.minute)
        return base + timedelta(days=state.hour_offset)
    raise KeyError(f"no zoom level {level}")


def encode(selected: datetime, level: int, now: datetime) -> NavigationState:
    """Build the navigation state that decodes back to selected at level.

    Every field is filled from selected, so the state stays consistent when
    the active level changes. At the Lunar level week_in_month holds the
    week within the 28-day cycle instead of the month-grid week.
    """
    month = selected.month - 1
    now_month = now.month - 1
    return NavigationState(
        decade_offset=selected.year // 10 - now.year // 10,
        year_offset=selected.year - now.year,
        quarter_offset=(selected.year * 4 + quarter_of(month))
        - (now.year * 4 + quarter_of(now_month)),
        month_offset=(selected.year * 12 + month) - (now.year * 12 + now_month),
        week_offset=(sunday_on_or_before(selected) - sunday_on_or_before(now)).days // 7,
        hour_offset=(selected.date() - now.date()).days,
        lunar_offset=lunar_cycle_index(selected) - lunar_cycle_index(now),
        month_in_year=month,
        month_in_quarter=month % 3,
        week_in_month=(
            lunar_week_in_cycle(selected) if level == LUNAR else week_in_month(selected)
        ),
        day_in_week=day_in_week(selected),
        hour_in_day=selected.hour,
    )


def present_state(now: datetime, level: int) -> NavigationState:
    """All offsets zero, every counter at now's value."""
    return encode(now, level, now)


def navigate_to(selected: datetime, level: int, now: datetime) -> NavigationState:
    """Jump directly to a concrete datetime, clamped to the supported years."""
    return encode(clamp_to_supported(selected), level, now)


def translate(state: NavigationState, from_level: int, to_level: int, now: datetime) -> NavigationState:
    """Carry the selected datetime across a zoom level change."""
    selected = decode(state, from_level, now)
    logger.debug("translate %s from level %d to %d", selected, from_level, to_level)
    return encode(selected, to_level, now)


def _with_year_offset(state: NavigationState, year_offset: int, now: datetime) -> NavigationState:
    return replace(
        state,
        year_offset=year_offset,
        decade_offset=(now.year + year_offset) // 10 - now.year // 10,
    )


def navigate(state: NavigationState, level: int, direction: int, now: datetime) -> NavigationState:
    """Step the active level's unit by direction (+1 / -1).

    Counters wrap modularly into the next-coarser offset. The Month level
    moves one calendar week and files it under the month holding the new
    day, so N steps forward followed by N steps back restore any state
    produced by encode.
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be +1 or -1, got {direction}")

    if level == LANDING:
        return state
    if level == CENTURY:
        result = replace(
            state,
            year_offset=state.year_offset + 10 * direction,
            decade_offset=state.decade_offset + direction,
        )
    elif level == DECADE:
        result = _with_year_offset(state, state.year_offset + direction, now)
    elif level == YEAR:
        carry, month = divmod(state.month_in_year + direction, 12)
        result = replace(
            _with_year_offset(state, state.year_offset + carry, now), month_in_year=month
        )
    elif level == QUARTER:
        carry, month = divmod(state.month_in_quarter + direction, 3)
        result = replace(
            state, quarter_offset=state.quarter_offset + carry, month_in_quarter=month
        )
    elif level == MONTH:
        # One calendar week; re-anchored in the grid of the month holding the new day
        moved = encode(decode(state, MONTH, now) + timedelta(days=7 * direction), MONTH, now)
        result = replace(
            state, month_offset=moved.month_offset, week_in_month=moved.week_in_month
        )
    elif level == LUNAR:
        carry, week = divmod(state.week_in_month + direction, LUNAR_WEEKS)
        result = replace(state, lunar_offset=state.lunar_offset + carry, week_in_month=week)
    elif level == WEEK:
        carry, day = divmod(state.day_in_week + direction, 7)
        result = replace(state, week_offset=state.week_offset + carry, day_in_week=day)
    elif level in (DAY, CLOCK):
        carry, hour = divmod(state.hour_in_day + HOUR_STEP * direction, 24)
        result = replace(state, hour_offset=state.hour_offset + carry, hour_in_day=hour)
    else:
        raise KeyError(f"no zoom level {level}")

    logger.debug("navigate level=%d direction=%+d -> %s", level, direction, result)
    return result


def truncate(dt: datetime, level: int) -> datetime:
    """Floor dt to the native granularity of a zoom level."""
    if level in (LANDING, CENTURY, DECADE):
        return datetime(dt.year, 1, 1)
    if level in (YEAR, QUARTER):
        return datetime(dt.year, dt.month, 1)
    if level in (MONTH, WEEK):
        return datetime(dt.year, dt.month, dt.day)
    if level == LUNAR:
        return sunday_on_or_before(dt)
    if level in (DAY, CLOCK):
        return datetime(dt.year, dt.month, dt.day, dt.hour)
    raise KeyError(f"no zoom level {level}")


def ease_in_out_quint(p: float) -> float:
    if p < 0.5:
        return 16 * p**5
    return 1 - (-2 * p + 2) ** 5 / 2


class ReturnToPresent:
    """Animates every navigation field back to the present over a fixed duration.

    The caller supplies a monotonic timestamp to start() and tick(); the
    final tick snaps exactly to present_state(now, level).
    """

    DURATION = 1.5  # seconds

    def __init__(self) -> None:
        self._origin: NavigationState | None = None
        self._target: NavigationState | None = None
        self._started_at = 0.0

    @property
    def active(self) -> bool:
        return self._target is not None

    def start(self, state: NavigationState, level: int, now: datetime, timestamp: float) -> bool:
        """Begin animating from state. Returns False (no-op) when already running."""
        if self.active:
            return False
        self._origin = state
        self._target = present_state(now, level)
        self._started_at = timestamp
        logger.info("return to present started from %s", state)
        return True

    def tick(self, timestamp: float) -> NavigationState:
        """Interpolated state at timestamp.

        Raises:
            RuntimeError: If called while no animation is running.
        """
        if self._origin is None or self._target is None:
            raise RuntimeError("return to present is not running")

        progress = min(1.0, max(0.0, (timestamp - self._started_at) / self.DURATION))
        if progress >= 1.0:
            target = self._target
            self._origin = self._target = None
            logger.info("return to present finished")
            return target

        eased = ease_in_out_quint(progress)
        origin = asdict(self._origin)
        target = asdict(self._target)
        values = {
            f.name: math.floor(origin[f.name] + (target[f.name] - origin[f.name]) * eased + 0.5)
            for f in fields(NavigationState)
        }
        return NavigationState(**values)

    def finish(self) -> NavigationState:
        """Stop immediately and return the exact present state.

        Raises:
            RuntimeError: If called while no animation is running.
        """
        if self._target is None:
            raise RuntimeError("return to present is not running")
        target = self._target
        self._origin = self._target = None
        logger.info("return to present cut short")
        return target
