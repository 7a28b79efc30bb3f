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

"""
Unit conversion adapters.

The navigation routines work exclusively with SI values (seconds, radians,
meters, m/s, m/s^2, rad/s). Measurements expressed in other units are
normalized with the functions in this module before they reach the
navigator. Every function name states the output unit; the input unit is
passed explicitly.

All functions accept scalars or numpy arrays.
"""

from enum import Enum
from typing import Union

import numpy as np

from .constants import D2R, G_GRAVITY

Numeric = Union[float, np.ndarray]

__all__ = [
    'TimeUnit', 'AngleUnit', 'DistanceUnit', 'SpeedUnit',
    'AccelerationUnit', 'AngularSpeedUnit',
    'time_to_seconds', 'angle_to_radians', 'distance_to_meters',
    'speed_to_meters_per_second', 'acceleration_to_meters_per_squared_second',
    'angular_speed_to_radians_per_second',
    'radians_to_angle', 'meters_per_second_to_speed',
]


class TimeUnit(Enum):
    """Time units with their length in seconds"""
    NANOSECOND = 1e-9
    MICROSECOND = 1e-6
    MILLISECOND = 1e-3
    SECOND = 1.0
    MINUTE = 60.0
    HOUR = 3600.0
    DAY = 86400.0


class AngleUnit(Enum):
    """Angle units with their size in radians"""
    RADIANS = 1.0
    DEGREES = D2R


class DistanceUnit(Enum):
    """Distance units with their length in meters"""
    MILLIMETER = 1e-3
    CENTIMETER = 1e-2
    METER = 1.0
    KILOMETER = 1e3
    INCH = 0.0254
    FOOT = 0.3048
    MILE = 1609.344


class SpeedUnit(Enum):
    """Speed units with their size in m/s"""
    METERS_PER_SECOND = 1.0
    KILOMETERS_PER_HOUR = 1000.0 / 3600.0
    KILOMETERS_PER_SECOND = 1000.0
    FEET_PER_SECOND = 0.3048
    MILES_PER_HOUR = 1609.344 / 3600.0
    KNOT = 1852.0 / 3600.0


class AccelerationUnit(Enum):
    """Acceleration units with their size in m/s^2"""
    METERS_PER_SQUARED_SECOND = 1.0
    FEET_PER_SQUARED_SECOND = 0.3048
    G = G_GRAVITY


class AngularSpeedUnit(Enum):
    """Angular speed units with their size in rad/s"""
    RADIANS_PER_SECOND = 1.0
    DEGREES_PER_SECOND = D2R
    DEGREES_PER_HOUR = D2R / 3600.0


def _scale(value: Numeric, unit: Enum, unit_type: type) -> Numeric:
    if not isinstance(unit, unit_type):
        raise ValueError(f"Unsupported unit {unit!r}, expected a {unit_type.__name__}")
    if isinstance(value, (list, tuple)):
        value = np.asarray(value, dtype=np.float64)
    return value * unit.value


def time_to_seconds(value: Numeric, unit: TimeUnit) -> Numeric:
    """Convert a time interval to seconds"""
    return _scale(value, unit, TimeUnit)


def angle_to_radians(value: Numeric, unit: AngleUnit) -> Numeric:
    """Convert an angle to radians"""
    return _scale(value, unit, AngleUnit)


def distance_to_meters(value: Numeric, unit: DistanceUnit) -> Numeric:
    """Convert a distance or height to meters"""
    return _scale(value, unit, DistanceUnit)


def speed_to_meters_per_second(value: Numeric, unit: SpeedUnit) -> Numeric:
    """Convert a speed to m/s"""
    return _scale(value, unit, SpeedUnit)


def acceleration_to_meters_per_squared_second(value: Numeric,
                                              unit: AccelerationUnit) -> Numeric:
    """
    Convert an acceleration or specific force to m/s^2.

    Examples
    --------
    >>> acceleration_to_meters_per_squared_second(1.0, AccelerationUnit.G)
    9.80665
    """
    return _scale(value, unit, AccelerationUnit)


def angular_speed_to_radians_per_second(value: Numeric,
                                        unit: AngularSpeedUnit) -> Numeric:
    """
    Convert an angular rate to rad/s.

    Gyroscope datasheets usually quote biases in deg/h and rates in deg/s,
    both are handled here.
    """
    return _scale(value, unit, AngularSpeedUnit)


def radians_to_angle(value: Numeric, unit: AngleUnit) -> Numeric:
    """Convert radians back to the requested angle unit"""
    factor = _scale(1.0, unit, AngleUnit)
    if isinstance(value, (list, tuple)):
        value = np.asarray(value, dtype=np.float64)
    return value / factor


def meters_per_second_to_speed(value: Numeric, unit: SpeedUnit) -> Numeric:
    """Convert m/s back to the requested speed unit"""
    factor = _scale(1.0, unit, SpeedUnit)
    if isinstance(value, (list, tuple)):
        value = np.asarray(value, dtype=np.float64)
    return value / factor
