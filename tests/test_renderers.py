import tempfile
import unittest
from datetime import datetime
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.colors import to_hex

from cosmiccalendar.catalog import CLOCK, DAY, LUNAR, MONTH
from cosmiccalendar.compute import run
from cosmiccalendar.renderers.plotly_3d import render_plotly_chart
from cosmiccalendar.renderers.static import render_static_chart, save_static_chart
from cosmiccalendar.theme import DARK, LIGHT

NOW = datetime(2025, 12, 9, 14, 5)


class TestPlotlyRenderer(unittest.TestCase):
    def test_traces(self) -> None:
        scene = run(LUNAR, selected=datetime(2025, 10, 1, 9, 0), now=NOW)
        fig = render_plotly_chart(scene)
        names = {trace.name for trace in fig.data}
        self.assertIn("bodies", names)
        self.assertIn("orbits", names)
        self.assertIn("connectors", names)
        self.assertIn("moon", names)
        self.assertIn("labels_user_selected", names)

    def test_connectors_use_selected_color(self) -> None:
        scene = run(MONTH, selected=datetime(2025, 11, 3, 8, 0), now=NOW)
        for pal in (DARK, LIGHT):
            fig = render_plotly_chart(scene, pal)
            connectors = next(trace for trace in fig.data if trace.name == "connectors")
            self.assertEqual(connectors.line.color, pal.user_selected)
            self.assertNotEqual(connectors.line.color, pal.actual_now)

    def test_polar_camera(self) -> None:
        fig = render_plotly_chart(run(CLOCK, now=NOW), LIGHT)
        self.assertEqual(fig.layout.scene.camera.eye.x, 0.0)
        self.assertEqual(fig.layout.paper_bgcolor, LIGHT.background)


class TestStaticRenderer(unittest.TestCase):
    def test_save_png(self) -> None:
        scene = run(MONTH, now=NOW)
        with tempfile.TemporaryDirectory() as tmp:
            path = save_static_chart(scene, Path(tmp) / "out" / "month.png")
            self.assertTrue(path.exists())
            self.assertEqual(path.read_bytes()[:8], b"\x89PNG\r\n\x1a\n")

    def test_connectors_use_selected_color(self) -> None:
        scene = run(DAY, selected=datetime(2025, 12, 10, 2, 0), now=NOW)
        fig = render_static_chart(scene, DARK)
        ax = fig.axes[0]
        connectors = [
            line for line in ax.get_lines()
            if to_hex(line.get_color()) == DARK.user_selected and line.get_linewidth() == 1
        ]
        plt.close(fig)
        self.assertEqual(len(connectors), len(scene.bodies))


if __name__ == "__main__":
    unittest.main(verbosity=2)
