# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Trajectory propagation over a sequence of IMU samples"""

import logging
from dataclasses import dataclass, fields
from typing import Optional

import numpy as np
import pandas as pd

from ..coordinate.geodetic import gravity_ned
from ..core.constants import G_GRAVITY
from ..core.data_structures import BodyKinematics, NEDFrame
from ..core.exceptions import InertialNavigatorError, InvalidConfigurationError
from ..logger import LogContext, LogLevel
from .ned_navigator import GravityModel, NEDInertialNavigator

__all__ = ['TrajectoryConfig', 'propagate_trajectory', 'MEASUREMENT_COLUMNS', 'TRAJECTORY_COLUMNS']

logger = logging.getLogger(__name__)

MEASUREMENT_COLUMNS = ['accel_x', 'accel_y', 'accel_z', 'gyro_x', 'gyro_y', 'gyro_z']
TRAJECTORY_COLUMNS = ['time', 'lat', 'lon', 'height', 'vn', 've', 'vd', 'roll', 'pitch', 'yaw']

GRAVITY_MODELS = ('wgs84', 'constant')


@dataclass
class TrajectoryConfig:
    """
    Configuration of a trajectory propagation run.

    Attributes:
        time_interval (float): IMU interval (s), required when the samples
            carry no time column
        gravity_model (str): 'wgs84' normal gravity or 'constant'
        constant_gravity (float): gravity magnitude (m/s^2) for the
            'constant' model, pointing down
        log_level (str): level of the trajectory logger during the run
        log_every (int): epochs between progress messages

    Examples:
        >>> config = TrajectoryConfig.from_dict({'time_interval': 0.01})
        >>> config.gravity_model
        'wgs84'
    """
    time_interval: Optional[float] = None
    gravity_model: str = 'wgs84'
    constant_gravity: float = G_GRAVITY
    log_level: str = 'INFO'
    log_every: int = 1000

    def __post_init__(self):
        if self.time_interval is not None and not self.time_interval > 0.0:
            raise InvalidConfigurationError('trajectory', f"time_interval must be positive, got {self.time_interval}")
        if self.gravity_model not in GRAVITY_MODELS:
            raise InvalidConfigurationError('trajectory', f"unknown gravity model '{self.gravity_model}'")
        if str(self.log_level).upper() not in LogLevel.__members__:
            raise InvalidConfigurationError('trajectory', f"unknown log level '{self.log_level}'")
        if self.log_every < 1:
            raise InvalidConfigurationError('trajectory', f"log_every must be at least 1, got {self.log_every}")

    @classmethod
    def from_dict(cls, config: dict) -> 'TrajectoryConfig':
        """Create configuration from a dictionary, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise InvalidConfigurationError('trajectory', f"unknown keys {unknown}")
        return cls(**config)

    def gravity(self) -> GravityModel:
        """Gravity model selected by the configuration"""
        if self.gravity_model == 'constant':
            g_n = np.array([0.0, 0.0, self.constant_gravity], dtype=np.float64)
            return lambda lat, h: g_n
        return gravity_ned


def propagate_trajectory(initial_frame: NEDFrame, samples: pd.DataFrame,
                         config: Optional[TrajectoryConfig] = None) -> pd.DataFrame:
    """
    Run the NED navigator over a table of IMU samples.

    Parameters:
    -----------
    initial_frame : NEDFrame
        State at the first epoch, not modified
    samples : pd.DataFrame
        IMU samples with columns accel_x, accel_y, accel_z (m/s^2) and
        gyro_x, gyro_y, gyro_z (rad/s), each averaged over the interval that
        ends at the sample. With a 'time' column the first row only marks
        the epoch of initial_frame; without it every row is one
        config.time_interval step.
    config : TrajectoryConfig, optional
        Run configuration

    Returns:
    --------
    pd.DataFrame
        One row per epoch (initial state included) with columns
        time, lat, lon, height (rad, rad, m), vn, ve, vd (m/s) and
        roll, pitch, yaw (rad)

    Raises:
    -------
    ValueError
        If columns are missing or times are not strictly increasing
    InertialNavigatorError
        If an epoch fails numerically; the run stops at that epoch
    """
    config = config or TrajectoryConfig()

    missing = [col for col in MEASUREMENT_COLUMNS if col not in samples.columns]
    if missing:
        raise ValueError(f"Missing IMU columns: {missing}")
    if samples.empty:
        raise ValueError("No IMU samples to propagate")

    imu = samples[MEASUREMENT_COLUMNS].to_numpy(dtype=np.float64)
    if 'time' in samples.columns:
        times = samples['time'].to_numpy(dtype=np.float64)
        if np.any(np.diff(times) <= 0.0):
            raise ValueError("Sample times must be strictly increasing")
        intervals = np.diff(times)
        imu = imu[1:]
    elif config.time_interval is not None:
        intervals = np.full(len(imu), config.time_interval)
        times = np.concatenate([[0.0], np.cumsum(intervals)])
    else:
        raise ValueError("Samples have no 'time' column and no time_interval is configured")

    navigator = NEDInertialNavigator(gravity=config.gravity())
    rows = np.zeros((len(intervals) + 1, len(TRAJECTORY_COLUMNS)), dtype=np.float64)

    with LogContext(logger, config.log_level):
        logger.info(f"Propagating {len(intervals)} IMU epochs from t={times[0]:.3f}")

        frame = initial_frame.copy()
        rows[0] = _row(times[0], frame)
        for k, (dt, measurement) in enumerate(zip(intervals, imu), start=1):
            kinematics = BodyKinematics.from_arrays(measurement[:3], measurement[3:])
            try:
                frame = navigator.navigate_frame(dt, frame, kinematics)
            except InertialNavigatorError:
                logger.error(f"Navigation failed at epoch {k} (t={times[k]:.3f})")
                raise
            rows[k] = _row(times[k], frame)

            if k % config.log_every == 0:
                logger.debug(f"Epoch {k}/{len(intervals)}: lat={np.rad2deg(frame.position.latitude):.8f} deg, "
                             f"lon={np.rad2deg(frame.position.longitude):.8f} deg, h={frame.position.height:.3f} m")

        logger.info(f"Trajectory finished at t={times[-1]:.3f}")

    return pd.DataFrame(rows, columns=TRAJECTORY_COLUMNS)


def _row(time: float, frame: NEDFrame) -> np.ndarray:
    return np.concatenate([[time], frame.as_array(),
                           frame.coordinate_transformation.euler_angles()])
