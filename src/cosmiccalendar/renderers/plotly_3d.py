"""Plotly 3D interactive renderer.

Scene coordinates are (x, height, z); Plotly's vertical axis is z, so every
point is drawn as (x, z, height). Lines of one style share a single trace
using None separators.
"""

import numpy as np
import plotly.graph_objects as go

from cosmiccalendar.models import Highlight, MarkerPrimitive, SceneData
from cosmiccalendar.theme import DARK, Palette

_SUN_SIZE = 14


def _polyline_xyz(
    polylines: list[np.ndarray],
) -> tuple[list[float | None], list[float | None], list[float | None]]:
    """Concatenate polylines into one trace with None separators."""
    xs: list[float | None] = []
    ys: list[float | None] = []
    zs: list[float | None] = []
    for line in polylines:
        xs += list(line[:, 0]) + [None]
        ys += list(line[:, 2]) + [None]
        zs += list(line[:, 1]) + [None]
    return xs, ys, zs


def _line_trace(polylines: list[np.ndarray], color: str, opacity: float, width: float,
                name: str) -> go.Scatter3d:
    xs, ys, zs = _polyline_xyz(polylines)
    return go.Scatter3d(
        x=xs,
        y=ys,
        z=zs,
        mode="lines",
        line=dict(color=color, width=width),
        opacity=opacity,
        hoverinfo="skip",
        name=name,
    )


def _marker_traces(markers: tuple[MarkerPrimitive, ...], pal: Palette) -> list[go.Scatter3d]:
    traces = []
    for highlight in Highlight:
        color = pal.marker_color(highlight)
        group = [m for m in markers if m.highlight is highlight]

        lines = [np.array(m.points) for m in group if m.kind != "label"]
        if lines:
            width = 2 if highlight is Highlight.NEUTRAL else 4
            opacity = 0.6 if highlight is Highlight.NEUTRAL else 1.0
            traces.append(_line_trace(lines, color, opacity, width, f"markers_{highlight.value}"))

        labels = [m for m in group if m.kind == "label"]
        if labels:
            traces.append(
                go.Scatter3d(
                    x=[m.points[0][0] for m in labels],
                    y=[m.points[0][2] for m in labels],
                    z=[m.points[0][1] for m in labels],
                    mode="text",
                    text=[m.text for m in labels],
                    textfont=dict(color=color, size=11),
                    hoverinfo="skip",
                    name=f"labels_{highlight.value}",
                )
            )
    return traces


def render_plotly_chart(scene: SceneData, pal: Palette = DARK) -> go.Figure:
    """Render SceneData as a Plotly 3D figure.

    Bodies sit at the selected height with their orbit circles, worldlines
    and connectors back to the real clock's height; markers are colored by
    highlight.

    Args:
        scene: Fully computed scene.
        pal: Color palette.

    Returns:
        Plotly Figure object.
    """
    traces: list[go.Scatter3d] = []

    traces.append(
        _line_trace([b.orbit for b in scene.bodies], pal.orbit, pal.orbit_opacity, 1, "orbits")
    )
    for b in scene.bodies:
        traces.append(
            _line_trace([b.worldline], b.body.color, pal.worldline_opacity, 2, f"{b.body.name}_worldline")
        )
    connectors = [b.connector for b in scene.bodies if b.connector is not None]
    if connectors:
        traces.append(
            _line_trace(connectors, pal.user_selected, pal.connector_opacity, 2, "connectors")
        )
    if scene.moon_worldline is not None:
        traces.append(_line_trace([scene.moon_worldline], "#cccccc", 0.8, 2, "moon"))

    traces.extend(_marker_traces(scene.markers, pal))

    traces.append(
        go.Scatter3d(
            x=[0.0],
            y=[0.0],
            z=[scene.selected_height],
            mode="markers",
            marker=dict(size=_SUN_SIZE, color=pal.sun),
            hoverinfo="skip",
            name="Sun",
        )
    )
    traces.append(
        go.Scatter3d(
            x=[b.position[0] for b in scene.bodies],
            y=[b.position[2] for b in scene.bodies],
            z=[b.position[1] for b in scene.bodies],
            mode="markers",
            marker=dict(size=[b.body.size for b in scene.bodies], color=[b.body.color for b in scene.bodies]),
            text=[b.body.name for b in scene.bodies],
            hoverinfo="text",
            name="bodies",
        )
    )

    fig = go.Figure(data=traces)

    # Camera eye in Plotly's normalized units; polar levels look straight down the time axis
    zoom = scene.zoom
    eye = dict(x=0.0, y=0.01, z=2.0) if zoom.is_polar else dict(x=1.25, y=1.25, z=0.9)
    fig.update_layout(
        paper_bgcolor=pal.background,
        plot_bgcolor=pal.background,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        height=800,
        scene=dict(
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            zaxis=dict(visible=False),
            bgcolor=pal.background,
            aspectmode="data",
            camera=dict(eye=eye),
        ),
    )

    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]

    return fig
