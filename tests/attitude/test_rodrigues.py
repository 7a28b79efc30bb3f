#!/usr/bin/env python3
"""Test suite for rotation vector kernels"""

import unittest
import numpy as np
from pystrapdown.attitude.rodrigues import (
    rotation_vector, average_attitude_factor, rotation_matrix
)
from pystrapdown.attitude.skew import skew
from pystrapdown.core.constants import SMALL_ANGLE_THRESHOLD


class TestRotationVector(unittest.TestCase):

    def test_rotation_vector(self):
        alpha, magnitude = rotation_vector(np.array([0.3, 0.0, -0.4]), 0.1)
        np.testing.assert_allclose(alpha, [0.03, 0.0, -0.04])
        self.assertAlmostEqual(magnitude, 0.05)
        self.assertIsInstance(magnitude, float)

    def test_zero_rate(self):
        alpha, magnitude = rotation_vector(np.zeros(3), 1.0)
        np.testing.assert_array_equal(alpha, np.zeros(3))
        self.assertEqual(magnitude, 0.0)


class TestRotationMatrix(unittest.TestCase):

    def test_rotation_about_z(self):
        """Rotation of 0.5 rad about the z axis"""
        angle = 0.5
        alpha = np.array([0.0, 0.0, angle])
        expected = np.array([[np.cos(angle), -np.sin(angle), 0.0],
                             [np.sin(angle), np.cos(angle), 0.0],
                             [0.0, 0.0, 1.0]])
        np.testing.assert_allclose(rotation_matrix(alpha, angle), expected, atol=1e-15)

    def test_orthonormal(self):
        alpha = np.array([0.7, -1.2, 0.4])
        R = rotation_matrix(alpha, float(np.linalg.norm(alpha)))
        np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-14)
        self.assertAlmostEqual(np.linalg.det(R), 1.0, places=14)

    def test_rotation_axis_is_fixed(self):
        alpha = np.array([0.2, 0.1, -0.3])
        R = rotation_matrix(alpha, float(np.linalg.norm(alpha)))
        np.testing.assert_allclose(R @ alpha, alpha, atol=1e-15)

    def test_small_angle_branch(self):
        alpha = np.array([1e-9, -2e-9, 5e-10])
        magnitude = float(np.linalg.norm(alpha))
        np.testing.assert_array_equal(rotation_matrix(alpha, magnitude), np.eye(3) + skew(alpha))

    def test_small_angle_continuity(self):
        """Both branches agree at the threshold"""
        direction = np.array([1.0, 2.0, -2.0]) / 3.0
        above = direction * SMALL_ANGLE_THRESHOLD * (1.0 + 1e-6)
        below = direction * SMALL_ANGLE_THRESHOLD * (1.0 - 1e-6)
        R_above = rotation_matrix(above, float(np.linalg.norm(above)))
        R_below = rotation_matrix(below, float(np.linalg.norm(below)))
        np.testing.assert_allclose(R_above, np.eye(3) + skew(above), atol=1e-15)
        np.testing.assert_allclose(R_above, R_below, atol=1e-12)


class TestAverageAttitudeFactor(unittest.TestCase):

    def test_matches_integrated_rotation(self):
        """The factor is the mean of R(t * alpha) over t in [0, 1]"""
        angle = 0.8
        alpha = np.array([0.0, 0.0, angle])
        expected = np.array([[np.sin(angle) / angle, -(1.0 - np.cos(angle)) / angle, 0.0],
                             [(1.0 - np.cos(angle)) / angle, np.sin(angle) / angle, 0.0],
                             [0.0, 0.0, 1.0]])
        np.testing.assert_allclose(average_attitude_factor(alpha, angle), expected, atol=1e-14)

    def test_numerical_average(self):
        alpha = np.array([0.3, -0.5, 0.2])
        magnitude = float(np.linalg.norm(alpha))
        ts = np.linspace(0.0, 1.0, 2001)
        samples = np.array([rotation_matrix(t * alpha, t * magnitude) for t in ts])
        # Trapezoidal mean over the interval
        mean = (samples[:-1] + samples[1:]).sum(axis=0) / (2.0 * (len(ts) - 1))
        np.testing.assert_allclose(average_attitude_factor(alpha, magnitude), mean, atol=1e-6)

    def test_small_angle_branch(self):
        alpha = np.array([1e-9, 0.0, 0.0])
        np.testing.assert_array_equal(average_attitude_factor(alpha, 1e-9), np.eye(3))

    def test_small_angle_continuity(self):
        direction = np.array([0.0, 0.6, 0.8])
        above = direction * SMALL_ANGLE_THRESHOLD * (1.0 + 1e-6)
        A = average_attitude_factor(above, float(np.linalg.norm(above)))
        np.testing.assert_allclose(A, np.eye(3), atol=1e-12)

    def test_threshold_is_inclusive(self):
        alpha = np.array([SMALL_ANGLE_THRESHOLD, 0.0, 0.0])
        np.testing.assert_array_equal(average_attitude_factor(alpha, SMALL_ANGLE_THRESHOLD), np.eye(3))

    def test_returns_new_array(self):
        A = average_attitude_factor(np.zeros(3), 0.0)
        A[0, 0] = 5.0
        np.testing.assert_array_equal(average_attitude_factor(np.zeros(3), 0.0), np.eye(3))


if __name__ == '__main__':
    unittest.main()
