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

"""IMU data reading utilities"""

import logging
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd

from ..core.data_structures import BodyKinematics
from ..core.units import (
    AccelerationUnit,
    AngularSpeedUnit,
    acceleration_to_meters_per_squared_second,
    angular_speed_to_radians_per_second,
)

__all__ = ['IMUReader', 'load_imu_data', 'iter_kinematics', 'IMU_COLUMNS']

logger = logging.getLogger(__name__)

IMU_COLUMNS = ['time', 'accel_x', 'accel_y', 'accel_z', 'gyro_x', 'gyro_y', 'gyro_z']

ALTERNATIVE_COLUMNS = {
    'timestamp': 'time',
    'ax': 'accel_x', 'ay': 'accel_y', 'az': 'accel_z',
    'acc_x': 'accel_x', 'acc_y': 'accel_y', 'acc_z': 'accel_z',
    'gx': 'gyro_x', 'gy': 'gyro_y', 'gz': 'gyro_z',
    'wx': 'gyro_x', 'wy': 'gyro_y', 'wz': 'gyro_z',
}


class IMUReader:
    """IMU data reader for CSV and whitespace separated text files"""

    def __init__(self, file_path: str, format: str = 'csv',
                 accel_unit: AccelerationUnit = AccelerationUnit.METERS_PER_SQUARED_SECOND,
                 gyro_unit: AngularSpeedUnit = AngularSpeedUnit.RADIANS_PER_SECOND):
        """
        Initialize IMU reader

        Parameters:
        -----------
        file_path : str
            Path to IMU data file
        format : str
            File format ('csv', 'txt')
        accel_unit : AccelerationUnit
            Unit of the accelerometer columns in the file
        gyro_unit : AngularSpeedUnit
            Unit of the gyroscope columns in the file
        """
        self.file_path = Path(file_path)
        self.format = format.lower()
        self.accel_unit = accel_unit
        self.gyro_unit = gyro_unit

        if not self.file_path.exists():
            raise FileNotFoundError(f"IMU file not found: {file_path}")
        if self.format not in ('csv', 'txt'):
            raise ValueError(f"Unsupported format: {self.format}")
        if not isinstance(accel_unit, AccelerationUnit) or not isinstance(gyro_unit, AngularSpeedUnit):
            raise ValueError("accel_unit and gyro_unit must be AccelerationUnit and AngularSpeedUnit")

    def read(self, start_time: Optional[float] = None, duration: Optional[float] = None) -> pd.DataFrame:
        """
        Read IMU data from file

        Parameters:
        -----------
        start_time : float, optional
            Drop samples before this time
        duration : float, optional
            Duration in seconds to load, only used with start_time

        Returns:
        --------
        pd.DataFrame
            IMU data with columns: time, accel_x, accel_y, accel_z (m/s^2),
            gyro_x, gyro_y, gyro_z (rad/s), sorted by time
        """
        if self.format == 'csv':
            df = self._read_csv()
        else:
            df = self._read_txt()

        df = self._to_si(df)
        return self._apply_filters(df, start_time, duration)

    def _read_csv(self) -> pd.DataFrame:
        """
        Read IMU data from CSV file with automatic column mapping.

        Notes
        -----
        Supported alternative column names:
        - timestamp -> time
        - ax, ay, az / acc_x, acc_y, acc_z -> accel_x, accel_y, accel_z
        - gx, gy, gz / wx, wy, wz -> gyro_x, gyro_y, gyro_z
        Columns already carrying the standard name are never overwritten.
        """
        logger.info(f"Reading IMU data from CSV: {self.file_path}")

        imu_data = pd.read_csv(self.file_path)

        mapping = {old: new for old, new in ALTERNATIVE_COLUMNS.items()
                   if old in imu_data.columns and new not in imu_data.columns}
        imu_data = imu_data.rename(columns=mapping)

        missing = [col for col in IMU_COLUMNS if col not in imu_data.columns]
        if missing:
            raise ValueError(f"Missing required IMU columns: {missing}")

        return imu_data[IMU_COLUMNS]

    def _read_txt(self) -> pd.DataFrame:
        """
        Read IMU data from text file with space-separated values.

        Expected format, one sample per line, '#' starts a comment:
        time accel_x accel_y accel_z gyro_x gyro_y gyro_z
        """
        logger.info(f"Reading IMU data from TXT: {self.file_path}")

        try:
            imu_data = pd.read_csv(
                self.file_path,
                sep=r'\s+',
                names=IMU_COLUMNS,
                comment='#',
                header=None
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ValueError(f"Failed to read IMU text file: {e}") from e

        if imu_data[IMU_COLUMNS].isna().any().any():
            raise ValueError("IMU text file must have 7 numeric values per line")

        return imu_data

    def _to_si(self, imu_data: pd.DataFrame) -> pd.DataFrame:
        imu_data = imu_data.astype(float)
        accel = ['accel_x', 'accel_y', 'accel_z']
        gyro = ['gyro_x', 'gyro_y', 'gyro_z']
        imu_data[accel] = acceleration_to_meters_per_squared_second(imu_data[accel].to_numpy(), self.accel_unit)
        imu_data[gyro] = angular_speed_to_radians_per_second(imu_data[gyro].to_numpy(), self.gyro_unit)
        return imu_data

    def _apply_filters(self, imu_data: pd.DataFrame, start_time: Optional[float],
                       duration: Optional[float]) -> pd.DataFrame:
        """Apply time filters, sort chronologically and log a summary"""
        if start_time is not None:
            imu_data = imu_data[imu_data['time'] >= start_time]
            if duration is not None:
                imu_data = imu_data[imu_data['time'] <= start_time + duration]

        imu_data = imu_data.sort_values('time').reset_index(drop=True)

        logger.info(f"Loaded {len(imu_data)} IMU samples")
        if len(imu_data) > 1:
            dt = imu_data['time'].diff().median()
            freq = 1.0 / dt if dt > 0 else 0
            logger.info(f"  Time range: {imu_data['time'].iloc[0]:.3f} - {imu_data['time'].iloc[-1]:.3f}")
            logger.info(f"  Sampling rate: ~{freq:.1f} Hz")

        return imu_data


def iter_kinematics(imu_data: pd.DataFrame) -> Iterator[tuple[float, BodyKinematics]]:
    """
    Iterate over IMU samples as body kinematics

    Parameters:
    -----------
    imu_data : pd.DataFrame
        IMU data in the layout returned by IMUReader.read

    Yields:
    -------
    tuple[float, BodyKinematics]
        Sample time and measured kinematics
    """
    for row in imu_data[IMU_COLUMNS].itertuples(index=False):
        yield float(row.time), BodyKinematics(
            float(row.accel_x), float(row.accel_y), float(row.accel_z),
            float(row.gyro_x), float(row.gyro_y), float(row.gyro_z))


def load_imu_data(imu_file: str, start_time: Optional[float] = None,
                  duration: Optional[float] = None, format: str = 'csv') -> pd.DataFrame:
    """Convenience function to load SI IMU data from file, see IMUReader.read"""
    reader = IMUReader(imu_file, format=format)
    return reader.read(start_time=start_time, duration=duration)
