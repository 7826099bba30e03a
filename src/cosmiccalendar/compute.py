"""Scene assembly layer: navigation state to the full replacement geometry set."""

import logging
from datetime import datetime

from cosmiccalendar.calendar_math import lunar_cycle_index, moon_phase_name
from cosmiccalendar.catalog import (
    BODIES,
    CENTURY,
    DECADE,
    LANDING,
    LUNAR,
    QUARTER,
    YEAR,
    zoom_level,
)
from cosmiccalendar.clock import current_time
from cosmiccalendar.height import HEIGHT_PER_YEAR, height_for_datetime, height_for_year
from cosmiccalendar.markers import layout_markers, moon_worldline
from cosmiccalendar.models import Body, BodyState, NavigationState, OrbitalFrame, SceneData
from cosmiccalendar.navigation import decode, navigate_to, present_state
from cosmiccalendar.orbits import body_helix, build_orbital_frame, orbit_circle, position_3d

logger = logging.getLogger(__name__)

_CONNECTOR_SEGMENTS = 100
_WORLDLINE_SPAN_FACTOR = 2.5  # Worldline covers this many level spans, centered on the selection


def worldline_window(level: int, selected: datetime) -> tuple[float, float]:
    """Height range drawn for each body's worldline at a zoom level."""
    if level in (LANDING, CENTURY):
        start = selected.year // 100 * 100
        return height_for_year(start), height_for_year(start + 100)
    if level == DECADE:
        start = selected.year // 10 * 10
        return height_for_year(start), height_for_year(start + 10)
    if level == YEAR:
        return height_for_year(selected.year), height_for_year(selected.year + 1)
    half = zoom_level(level).display_span_years * HEIGHT_PER_YEAR * _WORLDLINE_SPAN_FACTOR / 2
    center = height_for_datetime(selected)
    return center - half, center + half


def worldline_segments(level: int) -> int:
    return 400 if level >= QUARTER else 200


def _body_state(
    b: Body,
    frame: OrbitalFrame,
    selected_height: float,
    actual_height: float,
    window: tuple[float, float],
    segments: int,
) -> BodyState:
    connector = None
    if actual_height != selected_height:
        connector = body_helix(actual_height, selected_height, b, frame, _CONNECTOR_SEGMENTS)
    return BodyState(
        body=b,
        position=position_3d(selected_height, b, frame),
        actual_position=position_3d(actual_height, b, frame),
        orbit=orbit_circle(b.orbital_radius, selected_height),
        worldline=body_helix(window[0], window[1], b, frame, segments),
        connector=connector,
    )


def build_scene(
    state: NavigationState,
    level: int,
    now: datetime,
    frame: OrbitalFrame,
    bodies: tuple[Body, ...] = BODIES,
) -> SceneData:
    """Regenerate every body, orbit, worldline, connector and marker.

    Args:
        state: Current navigation state.
        level: Active zoom level index.
        now: Real clock, minute precision.
        frame: Orbital phase frame fixed at startup.
        bodies: Body catalog; must contain Earth.

    Returns:
        SceneData for renderers.
    """
    zoom = zoom_level(level)
    selected = decode(state, level, now)
    selected_height = height_for_datetime(selected)
    actual_height = height_for_datetime(now)
    window = worldline_window(level, selected)
    segments = worldline_segments(level)
    earth = next(b for b in bodies if b.name == "Earth")

    body_states = tuple(
        _body_state(b, frame, selected_height, actual_height, window, segments) for b in bodies
    )
    markers = layout_markers(level, selected, now, frame, earth)
    moon = moon_worldline(lunar_cycle_index(selected), frame, earth) if level == LUNAR else None

    logger.debug(
        "scene level=%s selected=%s height=%.3f markers=%d",
        zoom.name,
        selected,
        selected_height,
        len(markers),
    )
    return SceneData(
        zoom=zoom,
        now=now,
        selected=selected,
        actual_height=actual_height,
        selected_height=selected_height,
        bodies=body_states,
        markers=markers,
        moon_worldline=moon,
        moon_phase=moon_phase_name(selected),
    )


def run(
    level: int,
    selected: datetime | None = None,
    now: datetime | None = None,
    tz_name: str = "UTC",
) -> SceneData:
    """Full pipeline for one frame: clock → orbital frame → state → scene.

    Args:
        level: Zoom level index.
        selected: Datetime to navigate to. The present if None.
        now: Real clock override. Read from the wall clock in tz_name if None.
        tz_name: pytz timezone name for the wall clock.

    Returns:
        SceneData for renderers.
    """
    if now is None:
        now = current_time(tz_name)
    frame = build_orbital_frame(now, BODIES)
    if selected is None:
        state = present_state(now, level)
    else:
        state = navigate_to(selected, level, now)
    logger.info("run level=%d selected=%s", level, selected or now)
    return build_scene(state, level, now, frame)

