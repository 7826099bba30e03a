"""Orbital angle projection and helical curve sampling.

Scene coordinates are (x, height, z): the Sun sits on the height axis and
every body orbits in the x-z plane at its catalog radius.
"""

import math
from datetime import datetime

import numpy as np

from cosmiccalendar.calendar_math import day_of_year
from cosmiccalendar.height import HEIGHT_PER_YEAR, height_for_datetime
from cosmiccalendar.models import Body, OrbitalFrame, Point

TAU = 2 * math.pi
VERNAL_EQUINOX_DOY = 79  # Approximate day-of-year of the March equinox
ORBIT_SEGMENTS = 128


def orbital_angle(height, reference_height: float, period: float, phase: float):
    """Angle of a body at height, given its phase at the reference height.

    Accepts a float or a numpy array of heights. The result is not wrapped so
    consecutive samples never jump by 2π.

    Args:
        height: Height(s) to project.
        reference_height: Height at which the body's angle equals phase.
        period: Orbital period in years; must be > 0.
        phase: Angle in radians at reference_height.

    Returns:
        phase - 2π * (height - reference_height) / 100 / period
    """
    return phase - TAU * (height - reference_height) / HEIGHT_PER_YEAR / period


def normalize_angle(angle: float) -> float:
    """Fold an angle into [0, 2π)."""
    return angle % TAU


def phase_at_reference(now: datetime, body: Body) -> float:
    """Stylized phase of body at now, measured from the vernal equinox."""
    elapsed_years = (day_of_year(now) - VERNAL_EQUINOX_DOY) / 365.25
    angle = orbital_angle(
        elapsed_years * HEIGHT_PER_YEAR, 0.0, body.orbital_period_years, body.phase_constant
    )
    return normalize_angle(angle)


def build_orbital_frame(now: datetime, bodies: tuple[Body, ...]) -> OrbitalFrame:
    """Fix every body's phase at the height of now."""
    return OrbitalFrame(
        reference_height=height_for_datetime(now),
        phases=tuple((b.name, phase_at_reference(now, b)) for b in bodies),
    )


def body_angle(height: float, body: Body, frame: OrbitalFrame) -> float:
    return orbital_angle(
        height, frame.reference_height, body.orbital_period_years, frame.phase(body.name)
    )


def position_3d(height: float, body: Body, frame: OrbitalFrame) -> Point:
    """Body center at height."""
    angle = body_angle(height, body, frame)
    r = body.orbital_radius
    return (math.cos(angle) * r, height, math.sin(angle) * r)


def helical_curve(
    start_height: float,
    end_height: float,
    radius: float,
    reference_height: float,
    period: float,
    phase: float,
    segments: int,
) -> np.ndarray:
    """Sample a helix between two heights.

    The angle is derived from each sampled height, so the curve passes
    exactly through the body position at any sampled height.

    Returns:
        Array of shape (segments + 1, 3) with rows (x, height, z).
    """
    heights = np.linspace(start_height, end_height, segments + 1)
    angles = orbital_angle(heights, reference_height, period, phase)
    return np.column_stack((np.cos(angles) * radius, heights, np.sin(angles) * radius))


def body_helix(
    start_height: float, end_height: float, body: Body, frame: OrbitalFrame, segments: int
) -> np.ndarray:
    return helical_curve(
        start_height,
        end_height,
        body.orbital_radius,
        frame.reference_height,
        body.orbital_period_years,
        frame.phase(body.name),
        segments,
    )


def orbit_circle(
    radius: float,
    height: float,
    segments: int = ORBIT_SEGMENTS,
    center: tuple[float, float] = (0.0, 0.0),
) -> np.ndarray:
    """Closed horizontal circle at height; the first row is repeated at the end."""
    angles = np.linspace(0.0, TAU, segments + 1)
    return np.column_stack(
        (
            center[0] + np.cos(angles) * radius,
            np.full(segments + 1, height),
            center[1] + np.sin(angles) * radius,
        )
    )


def radial_line(
    angle: float,
    inner: float,
    outer: float,
    height: float,
    center: tuple[float, float] = (0.0, 0.0),
) -> tuple[Point, Point]:
    """Segment along a ray from center, between two radii, at a fixed height."""
    c, s = math.cos(angle), math.sin(angle)
    return (
        (center[0] + c * inner, height, center[1] + s * inner),
        (center[0] + c * outer, height, center[1] + s * outer),
    )


def point_at(
    angle: float, radius: float, height: float, center: tuple[float, float] = (0.0, 0.0)
) -> Point:
    return (center[0] + math.cos(angle) * radius, height, center[1] + math.sin(angle) * radius)
