import math
import unittest
from dataclasses import replace
from datetime import datetime

import numpy as np

from cosmiccalendar.catalog import BODIES, ConfigurationError, body, validate_bodies
from cosmiccalendar.orbits import (
    TAU,
    build_orbital_frame,
    helical_curve,
    orbit_circle,
    orbital_angle,
    phase_at_reference,
    position_3d,
    radial_line,
)

NOW = datetime(2025, 12, 9, 14, 5)


class TestOrbitalAngle(unittest.TestCase):
    def test_angle_at_reference_equals_phase(self) -> None:
        for h, period, phase in ((0.0, 1.0, 0.3), (2512.5, 11.86, 4.0), (-350.0, 0.24, -1.0)):
            self.assertEqual(orbital_angle(h, h, period, phase), phase)

    def test_one_period_is_one_turn(self) -> None:
        angle = orbital_angle(1000.0 + 188.0, 1000.0, 1.88, 0.5)
        self.assertAlmostEqual(angle, 0.5 - TAU)

    def test_vectorized(self) -> None:
        heights = np.array([0.0, 25.0, 50.0])
        angles = orbital_angle(heights, 0.0, 1.0, 0.0)
        np.testing.assert_allclose(angles, [0.0, -math.pi / 2, -math.pi])

    def test_phase_at_reference_is_normalized(self) -> None:
        for b in BODIES:
            phase = phase_at_reference(NOW, b)
            self.assertGreaterEqual(phase, 0.0)
            self.assertLess(phase, TAU)

    def test_earth_phase_is_constant_at_equinox(self) -> None:
        # Day-of-year 79 (0-based) is March 21 in a common year
        self.assertAlmostEqual(phase_at_reference(datetime(2025, 3, 21), body("Earth")), 0.0)


class TestGeometry(unittest.TestCase):
    def setUp(self) -> None:
        self.frame = build_orbital_frame(NOW, BODIES)
        self.earth = body("Earth")

    def test_position_at_reference_height(self) -> None:
        phase = self.frame.phase("Earth")
        x, h, z = position_3d(self.frame.reference_height, self.earth, self.frame)
        self.assertAlmostEqual(x, math.cos(phase) * 50.0)
        self.assertAlmostEqual(z, math.sin(phase) * 50.0)
        self.assertEqual(h, self.frame.reference_height)

    def test_helix_passes_through_body_positions(self) -> None:
        phase = self.frame.phase("Mars")
        mars = body("Mars")
        curve = helical_curve(2400.0, 2600.0, mars.orbital_radius, self.frame.reference_height,
                              mars.orbital_period_years, phase, 200)
        self.assertEqual(curve.shape, (201, 3))
        for row in (0, 57, 200):
            expected = position_3d(curve[row, 1], mars, self.frame)
            np.testing.assert_allclose(curve[row], expected, atol=1e-9)

    def test_helix_has_no_angle_jumps(self) -> None:
        curve = helical_curve(0.0, 1000.0, 19.5, 0.0, 0.24, 6.2, 2000)
        steps = np.linalg.norm(np.diff(curve[:, [0, 2]], axis=0), axis=1)
        self.assertLess(steps.max(), 19.5 * TAU * 0.05)

    def test_orbit_circle_is_closed(self) -> None:
        ring = orbit_circle(36.0, 12.0)
        self.assertEqual(ring.shape, (129, 3))
        np.testing.assert_allclose(ring[0], ring[-1], atol=1e-9)
        np.testing.assert_allclose(np.hypot(ring[:, 0], ring[:, 2]), 36.0)
        self.assertTrue((ring[:, 1] == 12.0).all())

    def test_radial_line(self) -> None:
        inner, outer = radial_line(math.pi / 2, 10.0, 20.0, 5.0)
        self.assertAlmostEqual(inner[2], 10.0)
        self.assertAlmostEqual(outer[2], 20.0)
        self.assertEqual(inner[1], 5.0)


class TestCatalogValidation(unittest.TestCase):
    def test_zero_period_is_rejected(self) -> None:
        broken = (replace(body("Venus"), orbital_period_years=0.0),)
        with self.assertRaises(ConfigurationError):
            validate_bodies(broken)

    def test_catalog_is_valid(self) -> None:
        validate_bodies(BODIES)


if __name__ == "__main__":
    unittest.main(verbosity=2)
