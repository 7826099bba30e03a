"""Dark and light color palettes shared by the renderers."""

from dataclasses import dataclass

from cosmiccalendar.models import Highlight


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    sun: str
    actual_now: str  # Markers for the real clock's unit
    user_selected: str  # Markers for the navigated unit
    neutral: str
    orbit: str
    orbit_opacity: float
    worldline_opacity: float
    connector_opacity: float

    def marker_color(self, highlight: Highlight) -> str:
        if highlight is Highlight.ACTUAL_NOW:
            return self.actual_now
        if highlight is Highlight.USER_SELECTED:
            return self.user_selected
        return self.neutral


DARK = Palette(
    background="#000814",
    text="#ffffff",
    sun="#ffdd44",
    actual_now="#ff0000",
    user_selected="#00ffff",
    neutral="#ffffff",
    orbit="#00b4d8",
    orbit_opacity=0.3,
    worldline_opacity=0.6,
    connector_opacity=0.5,
)

LIGHT = Palette(
    background="#e8f4f8",
    text="#000000",
    sun="#ff9900",
    actual_now="#ff0000",
    user_selected="#0066cc",
    neutral="#000000",
    orbit="#00b4d8",
    orbit_opacity=0.3,
    worldline_opacity=0.6,
    connector_opacity=0.5,
)


def palette(name: str) -> Palette:
    return LIGHT if name == "light" else DARK
