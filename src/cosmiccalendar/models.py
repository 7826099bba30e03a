"""Data model definitions shared by the navigation, layout and render layers."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import numpy as np

Point = tuple[float, float, float]  # (x, height, z); the time axis is y


@dataclass(frozen=True)
class Body:
    """Immutable catalog entry for an orbiting body."""

    name: str  # Display name ("Earth")
    orbital_radius: float  # Distance from the Sun in scene units
    orbital_period_years: float  # Sidereal period; must be > 0
    phase_constant: float  # Decorative reference angle (radians)
    color: str  # Hex color ("#4a90e2")
    size: float  # Sphere radius in scene units


@dataclass(frozen=True)
class ZoomLevel:
    """One of the ten time resolutions."""

    index: int  # 0 = Landing ... 9 = Clock
    name: str  # "CENTURY", "LUNAR CYCLE", etc.
    span_label: str  # Human label for one unit ("10 years", "28 days")
    display_span_years: float  # Time visible at this resolution
    focus_target: str  # "none" | "sun" | "earth"
    camera_distance: float
    camera_height: float
    is_polar: bool = False  # Clock view looks straight down the time axis


@dataclass(frozen=True)
class NavigationState:
    """Mixed-radix offsets from the present plus the current unit within each level.

    SelectedDateTime is never stored; it is decoded from this state,
    the active zoom level and the current wall clock.
    """

    decade_offset: int = 0
    year_offset: int = 0
    quarter_offset: int = 0
    month_offset: int = 0  # Month level (navigated by week)
    week_offset: int = 0  # Week level (navigated by day)
    hour_offset: int = 0  # Day/Clock level; counts whole days
    lunar_offset: int = 0  # 28-day cycles
    month_in_year: int = 0  # 0-11
    month_in_quarter: int = 0  # 0-2
    week_in_month: int = 0  # 0-5; week in cycle (0-3) at the Lunar level
    day_in_week: int = 0  # 0 = Sunday
    hour_in_day: int = 0  # 0-23


@dataclass(frozen=True)
class OrbitalFrame:
    """Per-body phase at a reference height, fixed once from the real clock."""

    reference_height: float
    phases: tuple[tuple[str, float], ...]  # (body name, angle at reference height)

    def phase(self, name: str) -> float:
        return dict(self.phases)[name]


class Highlight(str, Enum):
    """Marker emphasis relative to the real clock and the navigated selection."""

    ACTUAL_NOW = "actual_now"
    USER_SELECTED = "user_selected"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class MarkerPrimitive:
    """A single boundary line, boundary curve, or text label."""

    kind: str  # "boundary_line" | "boundary_curve" | "label"
    highlight: Highlight
    points: tuple[Point, ...]  # Polyline vertices; a single anchor for labels
    group: str  # Sub-layout that produced it ("quarter", "hour_ring", ...)
    text: str = ""  # Labels only
    opacity: float = 1.0


@dataclass(frozen=True)
class BodyState:
    """Geometry for one body in the current scene."""

    body: Body
    position: Point  # At the selected height
    actual_position: Point  # At the real clock's height
    orbit: np.ndarray  # Closed circle at the selected height, shape (n, 3)
    worldline: np.ndarray  # Helix around the selected height, shape (n, 3)
    connector: np.ndarray | None  # Helix from actual to selected; None when equal


@dataclass(frozen=True)
class SceneData:
    """The sole input to renderers. The full replacement geometry set."""

    zoom: ZoomLevel
    now: datetime  # Real clock, minute precision
    selected: datetime  # Decoded SelectedDateTime
    actual_height: float
    selected_height: float
    bodies: tuple[BodyState, ...]
    markers: tuple[MarkerPrimitive, ...]
    moon_worldline: np.ndarray | None  # Lunar level only
    moon_phase: str  # Phase name at the selected date

    def body(self, name: str) -> BodyState:
        return next(b for b in self.bodies if b.body.name == name)
