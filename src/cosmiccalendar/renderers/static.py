"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from cosmiccalendar.models import Highlight, SceneData  # noqa: E402
from cosmiccalendar.theme import DARK, Palette  # noqa: E402

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(scene: SceneData, pal: Palette = DARK, chart_size: int = 10) -> Figure:
    """Render SceneData as a static 3D matplotlib image.

    Args:
        scene: Fully computed scene.
        pal: Color palette.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig = plt.figure(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor(pal.background)
    ax = fig.add_subplot(projection="3d")
    ax.set_facecolor(pal.background)

    # Time runs up the plot's z axis
    for b in scene.bodies:
        ax.plot(b.orbit[:, 0], b.orbit[:, 2], b.orbit[:, 1], color=pal.orbit,
                alpha=pal.orbit_opacity, linewidth=0.5)
        ax.plot(b.worldline[:, 0], b.worldline[:, 2], b.worldline[:, 1], color=b.body.color,
                alpha=pal.worldline_opacity, linewidth=1)
        if b.connector is not None:
            ax.plot(b.connector[:, 0], b.connector[:, 2], b.connector[:, 1],
                    color=pal.user_selected, alpha=pal.connector_opacity, linewidth=1)
        x, h, z = b.position
        ax.scatter([x], [z], [h], s=b.body.size * 8, color=b.body.color, depthshade=False)

    if scene.moon_worldline is not None:
        m = scene.moon_worldline
        ax.plot(m[:, 0], m[:, 2], m[:, 1], color="#cccccc", linewidth=1)

    for marker in scene.markers:
        color = pal.marker_color(marker.highlight)
        if marker.kind == "label":
            x, h, z = marker.points[0]
            ax.text(x, z, h, marker.text, color=color, fontsize=7, alpha=marker.opacity)
            continue
        xs = [p[0] for p in marker.points]
        zs = [p[2] for p in marker.points]
        hs = [p[1] for p in marker.points]
        width = 0.6 if marker.highlight is Highlight.NEUTRAL else 1.5
        ax.plot(xs, zs, hs, color=color, linewidth=width, alpha=marker.opacity)

    ax.scatter([0.0], [0.0], [scene.selected_height], s=200, color=pal.sun, depthshade=False)
    if scene.zoom.is_polar:
        ax.view_init(elev=90, azim=-90)
    ax.axis("off")

    return fig


def save_static_chart(scene: SceneData, output_path: Path | None = None, pal: Palette = DARK) -> Path:
    """Save SceneData as a PNG file.

    Args:
        scene: Fully computed scene.
        output_path: Destination path. Auto-generated under results/ if None.
        pal: Color palette.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = scene.selected.strftime("%Y_%m_%d_%H_%M")
        filename = f"{scene.zoom.name}__{when_str}.png".replace(" ", "_").lower()
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(scene, pal)
    fig.savefig(output_path, facecolor=pal.background)
    plt.close(fig)
    return output_path
