#!/usr/bin/env python3
"""Test suite for trajectory propagation"""

import unittest
import numpy as np
import pandas as pd
from pystrapdown.coordinate.geodetic import gravity_ned
from pystrapdown.core.constants import G_GRAVITY
from pystrapdown.core.data_structures import NEDFrame, NEDPosition, NEDVelocity
from pystrapdown.core.exceptions import InertialNavigatorError, InvalidConfigurationError
from pystrapdown.navigation.rates import earth_rate_ned
from pystrapdown.navigation.trajectory import (
    TrajectoryConfig, propagate_trajectory, MEASUREMENT_COLUMNS, TRAJECTORY_COLUMNS
)
from pystrapdown.io.imu_reader import IMU_COLUMNS


def stationary_samples(lat, h, n, gravity=None):
    """IMU samples of a level body at rest with axes along NED"""
    f = -gravity_ned(lat, h) if gravity is None else np.array([0.0, 0.0, -gravity])
    w = earth_rate_ned(lat)
    return pd.DataFrame({
        'accel_x': np.full(n, f[0]), 'accel_y': np.full(n, f[1]), 'accel_z': np.full(n, f[2]),
        'gyro_x': np.full(n, w[0]), 'gyro_y': np.full(n, w[1]), 'gyro_z': np.full(n, w[2]),
    })


class TestTrajectoryConfig(unittest.TestCase):

    def test_defaults(self):
        config = TrajectoryConfig()
        self.assertIsNone(config.time_interval)
        self.assertEqual(config.gravity_model, 'wgs84')
        self.assertEqual(config.constant_gravity, G_GRAVITY)
        self.assertIs(config.gravity(), gravity_ned)

    def test_from_dict(self):
        config = TrajectoryConfig.from_dict({'time_interval': 0.005, 'gravity_model': 'constant',
                                             'constant_gravity': 9.8, 'log_level': 'debug'})
        self.assertEqual(config.time_interval, 0.005)
        np.testing.assert_array_equal(config.gravity()(0.3, 100.0), [0.0, 0.0, 9.8])

    def test_unknown_keys(self):
        with self.assertRaises(InvalidConfigurationError) as context:
            TrajectoryConfig.from_dict({'time_interval': 0.01, 'filter': 'ekf'})
        self.assertIn("filter", context.exception.message)

    def test_invalid_values(self):
        for kwargs in ({'time_interval': 0.0}, {'time_interval': -1.0},
                       {'gravity_model': 'egm96'}, {'log_level': 'VERBOSE'}, {'log_every': 0}):
            with self.assertRaises(InvalidConfigurationError):
                TrajectoryConfig(**kwargs)


class TestPropagateTrajectory(unittest.TestCase):

    def setUp(self):
        self.lat, self.h = 0.6, 100.0
        self.initial = NEDFrame(NEDPosition(self.lat, 0.2, self.h))

    def test_with_time_column(self):
        samples = stationary_samples(self.lat, self.h, 11)
        samples.insert(0, 'time', 100.0 + 0.01 * np.arange(11))

        trajectory = propagate_trajectory(self.initial, samples)

        self.assertListEqual(list(trajectory.columns), TRAJECTORY_COLUMNS)
        self.assertEqual(len(trajectory), 11)
        np.testing.assert_array_equal(trajectory['time'].values, samples['time'].values)
        np.testing.assert_array_equal(trajectory.iloc[0][['lat', 'lon', 'height']].values,
                                      [self.lat, 0.2, self.h])
        np.testing.assert_allclose(trajectory[['vn', 've', 'vd']].values, 0.0, atol=1e-7)
        np.testing.assert_allclose(trajectory['lat'].values, self.lat, atol=1e-12)
        np.testing.assert_allclose(trajectory[['roll', 'pitch', 'yaw']].values, 0.0, atol=1e-8)

    def test_with_time_interval(self):
        samples = stationary_samples(self.lat, self.h, 10)
        trajectory = propagate_trajectory(self.initial, samples, TrajectoryConfig(time_interval=0.01))
        self.assertEqual(len(trajectory), 11)
        np.testing.assert_allclose(trajectory['time'].values, 0.01 * np.arange(11), atol=1e-12)
        np.testing.assert_allclose(trajectory['height'].values, self.h, atol=1e-7)

    def test_constant_gravity(self):
        samples = stationary_samples(self.lat, self.h, 20, gravity=G_GRAVITY)
        config = TrajectoryConfig(time_interval=0.05, gravity_model='constant')
        trajectory = propagate_trajectory(self.initial, samples, config)
        np.testing.assert_allclose(trajectory[['vn', 've', 'vd']].values, 0.0, atol=1e-6)

    def test_moving_north(self):
        initial = NEDFrame(NEDPosition(self.lat, 0.0, self.h), NEDVelocity(vn=50.0))
        samples = stationary_samples(self.lat, self.h, 100)
        trajectory = propagate_trajectory(initial, samples, TrajectoryConfig(time_interval=0.01))
        self.assertTrue(np.all(np.diff(trajectory['lat'].values) > 0.0))

    def test_initial_frame_not_modified(self):
        samples = stationary_samples(self.lat, self.h, 5)
        before = self.initial.as_array()
        propagate_trajectory(self.initial, samples, TrajectoryConfig(time_interval=0.1))
        np.testing.assert_array_equal(self.initial.as_array(), before)

    def test_missing_time_information(self):
        with self.assertRaises(ValueError):
            propagate_trajectory(self.initial, stationary_samples(self.lat, self.h, 5))

    def test_non_increasing_time(self):
        samples = stationary_samples(self.lat, self.h, 3)
        samples.insert(0, 'time', [0.0, 0.01, 0.01])
        with self.assertRaises(ValueError):
            propagate_trajectory(self.initial, samples)

    def test_missing_columns(self):
        samples = stationary_samples(self.lat, self.h, 3).drop(columns=['gyro_z'])
        with self.assertRaises(ValueError) as context:
            propagate_trajectory(self.initial, samples, TrajectoryConfig(time_interval=0.01))
        self.assertIn("gyro_z", str(context.exception))

    def test_measurement_columns(self):
        """The propagator reads measurements only, the time column is optional"""
        self.assertNotIn('time', MEASUREMENT_COLUMNS)
        self.assertEqual(MEASUREMENT_COLUMNS, [col for col in IMU_COLUMNS if col != 'time'])
        samples = stationary_samples(self.lat, self.h, 3)
        self.assertEqual(list(samples.columns), MEASUREMENT_COLUMNS)
        trajectory = propagate_trajectory(self.initial, samples, TrajectoryConfig(time_interval=0.01))
        self.assertEqual(len(trajectory), 4)

    def test_empty_samples(self):
        samples = stationary_samples(self.lat, self.h, 0)
        with self.assertRaises(ValueError):
            propagate_trajectory(self.initial, samples, TrajectoryConfig(time_interval=0.01))

    def test_failure_is_logged_and_raised(self):
        samples = stationary_samples(self.lat, self.h, 5)
        samples.loc[3, 'accel_x'] = np.nan
        with self.assertLogs('pystrapdown.navigation.trajectory', level='ERROR') as cm:
            with self.assertRaises(InertialNavigatorError):
                propagate_trajectory(self.initial, samples, TrajectoryConfig(time_interval=0.01))
        self.assertEqual(len(cm.output), 1)
        self.assertIn("epoch 4", cm.output[0])

    def test_progress_logging(self):
        samples = stationary_samples(self.lat, self.h, 10)
        config = TrajectoryConfig(time_interval=0.01, log_level='DEBUG', log_every=5)
        with self.assertLogs('pystrapdown.navigation.trajectory', level='DEBUG') as cm:
            propagate_trajectory(self.initial, samples, config)
        debug = [line for line in cm.output if line.startswith('DEBUG')]
        self.assertEqual(len(debug), 2)
        self.assertIn("Epoch 5/10", debug[0])
        self.assertTrue(any("Propagating 10 IMU epochs" in line for line in cm.output))


if __name__ == '__main__':
    unittest.main()
