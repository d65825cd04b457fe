from __future__ import annotations

import sys
import unittest
from math import radians
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from orbcloud.config import SamplingConfig
from orbcloud.pipeline import (
    hybrid_file_name,
    hybrid_point_clouds,
    orbital_file_name,
    orbital_point_cloud,
    orbital_profile,
)
from orbcloud.quantum import QuantumState, UnsupportedOrbital
from orbcloud.units import BOHR_RADIUS, PICOMETER

BOHR_PM = BOHR_RADIUS / PICOMETER


class SphericalPipelineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = SamplingConfig(angular_step=radians(30), max_radius=300 * PICOMETER)

    def test_1s_point_cloud(self) -> None:
        points = orbital_point_cloud(QuantumState(1, 0, 0), self.config)
        self.assertGreater(len(points), 0)
        self.assertTrue(np.all(points.probability >= self.config.threshold))
        self.assertTrue(np.all(points.probability <= 1.0))
        peak = points.points()[points.argmax()]
        self.assertLessEqual(abs(float(np.linalg.norm(peak)) - BOHR_PM), 1.5)

    def test_only_the_origin_shell_is_pruned(self) -> None:
        points = orbital_point_cloud(QuantumState(1, 0, 0), self.config)
        # 7 inclinations x 12 azimuths x 299 non-zero radii
        self.assertEqual(len(points), 7 * 12 * 299)

    def test_higher_threshold_keeps_fewer_points(self) -> None:
        low = orbital_point_cloud(QuantumState(2, 1, 0), self.config)
        high = orbital_point_cloud(QuantumState(2, 1, 0), SamplingConfig(
            angular_step=radians(30), max_radius=300 * PICOMETER, threshold=1e-5
        ))
        self.assertLess(len(high), len(low))

    def test_unsupported_orbital(self) -> None:
        with self.assertRaises(UnsupportedOrbital):
            orbital_point_cloud(QuantumState(4, 1, 0), self.config)


class CartesianPipelineTests(unittest.TestCase):
    def test_1s_point_cloud(self) -> None:
        config = SamplingConfig(strategy="cartesian", cube_extent=200 * PICOMETER, cube_step=10 * PICOMETER)
        points = orbital_point_cloud(QuantumState(1, 0, 0), config)
        self.assertGreater(len(points), 0)
        self.assertTrue(np.all(np.abs(points.points()) <= 20))
        peak = points.points()[points.argmax()] * 10.0
        self.assertLessEqual(abs(float(np.linalg.norm(peak)) - BOHR_PM), 5.0)

    def test_hybrid_point_clouds(self) -> None:
        config = SamplingConfig(strategy="cartesian", cube_extent=200 * PICOMETER, cube_step=20 * PICOMETER)
        clouds = hybrid_point_clouds("sp", config)
        self.assertEqual(len(clouds), 2)
        for cloud in clouds:
            self.assertGreater(len(cloud), 0)
            self.assertAlmostEqual(float(np.sum(cloud.probability)), 1.0, places=6)


class NamingTests(unittest.TestCase):
    def test_file_names(self) -> None:
        self.assertEqual(orbital_file_name(QuantumState(3, 2, -1)), "orbital_n_3_l_2_m_-1.obj")
        self.assertEqual(orbital_file_name(QuantumState(1, 0, 0), ".json"), "orbital_n_1_l_0_m_0.json")
        self.assertEqual(hybrid_file_name("sp^2", 1), "hybrid_orbital_sp^2_1.obj")

    def test_profile(self) -> None:
        profile = orbital_profile(QuantumState(1, 0, 0), SamplingConfig(max_radius=300 * PICOMETER))
        self.assertEqual(round(profile.most_probable_radius()), 53)


if __name__ == "__main__":
    unittest.main()
