from __future__ import annotations

import sys
import unittest
from math import pi
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from orbcloud.coordinates import to_cartesian, to_spherical


class CoordinateTests(unittest.TestCase):
    def test_to_cartesian_axes(self) -> None:
        np.testing.assert_allclose(to_cartesian(2.0, 0.0, 0.0), (0.0, 0.0, 2.0), atol=1e-12)
        np.testing.assert_allclose(to_cartesian(2.0, pi / 2, 0.0), (2.0, 0.0, 0.0), atol=1e-12)
        np.testing.assert_allclose(to_cartesian(2.0, pi / 2, pi / 2), (0.0, 2.0, 0.0), atol=1e-12)
        np.testing.assert_allclose(to_cartesian(2.0, pi, 0.0), (0.0, 0.0, -2.0), atol=1e-12)

    def test_to_spherical_on_axes_and_quadrants(self) -> None:
        cases = {
            (1.0, 0.0, 0.0): (1.0, pi / 2, 0.0),
            (0.0, 1.0, 0.0): (1.0, pi / 2, pi / 2),
            (-1.0, 0.0, 0.0): (1.0, pi / 2, pi),
            (0.0, -1.0, 0.0): (1.0, pi / 2, -pi / 2),
            (0.0, 0.0, -3.0): (3.0, pi, 0.0),
            (-1.0, -1.0, 0.0): (np.sqrt(2.0), pi / 2, -3 * pi / 4),
            (-1.0, 1.0, -np.sqrt(2.0)): (2.0, 3 * pi / 4, 3 * pi / 4),
        }
        for point, expected in cases.items():
            with self.subTest(point=point):
                np.testing.assert_allclose(to_spherical(*point), expected, atol=1e-12)

    def test_origin_is_finite(self) -> None:
        self.assertEqual(tuple(float(v) for v in to_spherical(0.0, 0.0, 0.0)), (0.0, 0.0, 0.0))

    def test_round_trip(self) -> None:
        rng = np.random.default_rng(7)
        points = rng.uniform(-500.0, 500.0, size=(200, 3))
        rho, theta, phi = to_spherical(points[:, 0], points[:, 1], points[:, 2])
        self.assertTrue(np.all((theta >= 0.0) & (theta <= pi)))
        x, y, z = to_cartesian(rho, theta, phi)
        np.testing.assert_allclose(np.column_stack((x, y, z)), points, rtol=1e-9, atol=1e-9)


if __name__ == "__main__":
    unittest.main()
