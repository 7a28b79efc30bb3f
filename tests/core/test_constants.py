#!/usr/bin/env python3
"""Test suite for navigation constants"""

import unittest
import numpy as np
from pystrapdown.core.constants import (
    RE_WGS84, RP_WGS84, FE_WGS84, E2_WGS84, E_WGS84, GM_WGS84,
    EARTH_ROTATION_RATE, EQUATORIAL_GRAVITY, G_GRAVITY,
    SMALL_ANGLE_THRESHOLD, KINEMATICS_SCALING_THRESHOLD, R2D, D2R
)


class TestEarthConstants(unittest.TestCase):
    """Test WGS84 ellipsoid constants"""

    def test_semi_axes(self):
        """Polar radius follows from semi-major axis and flattening"""
        self.assertEqual(RE_WGS84, 6378137.0)
        self.assertAlmostEqual(RP_WGS84, RE_WGS84 * (1.0 - FE_WGS84), delta=1e-3)

    def test_eccentricity(self):
        """Eccentricity squared matches the flattening"""
        self.assertAlmostEqual(E2_WGS84, FE_WGS84 * (2.0 - FE_WGS84), places=12)
        self.assertAlmostEqual(E_WGS84**2, E2_WGS84, places=15)

    def test_gravitational_constant(self):
        self.assertEqual(GM_WGS84, 3.986004418e14)

    def test_earth_rotation_rate(self):
        """Sidereal day of about 86164 s"""
        self.assertEqual(EARTH_ROTATION_RATE, 7.292115e-5)
        self.assertAlmostEqual(2.0 * np.pi / EARTH_ROTATION_RATE, 86164.1, delta=0.1)

    def test_gravity(self):
        self.assertAlmostEqual(EQUATORIAL_GRAVITY, 9.7803253359, places=10)
        self.assertEqual(G_GRAVITY, 9.80665)


class TestNavigationConstants(unittest.TestCase):

    def test_thresholds(self):
        self.assertEqual(SMALL_ANGLE_THRESHOLD, 1e-8)
        self.assertEqual(KINEMATICS_SCALING_THRESHOLD, 2e-5)

    def test_angle_conversions(self):
        self.assertAlmostEqual(180.0 * D2R, np.pi, places=15)
        self.assertAlmostEqual(np.pi * R2D, 180.0, places=12)
        self.assertAlmostEqual(R2D * D2R, 1.0, places=15)


if __name__ == '__main__':
    unittest.main()
