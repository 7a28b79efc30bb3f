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
Rotation vector kernels (Rodrigues formula).

A body angular rate w held over an interval dt turns the body by the rotation
vector alpha = w * dt. Two matrices are derived from it:

- the exact rotation undergone over the interval,
      R = I + sin(m)/m * S + (1 - cos(m))/m^2 * S^2
- the factor that averages the attitude over the interval,
      A = I + (1 - cos(m))/m^2 * S + (1 - sin(m)/m)/m^2 * S^2

where S = skew(alpha) and m = |alpha|. Both divide by m, so below
SMALL_ANGLE_THRESHOLD first order expansions are used instead.

References:
    Groves (2013), Eqs. (5.73) and (5.84)
"""

import numpy as np

from ..core.constants import SMALL_ANGLE_THRESHOLD
from .skew import skew

I3 = np.eye(3)


def rotation_vector(angular_rate: np.ndarray, dt: float) -> tuple[np.ndarray, float]:
    """
    Build the rotation vector and its magnitude for an interval.

    Parameters
    ----------
    angular_rate : np.ndarray
        Body angular rate averaged over the interval (rad/s), shape (3,)
    dt : float
        Interval length (s)

    Returns
    -------
    alpha : np.ndarray
        Rotation vector (rad), shape (3,)
    magnitude : float
        |alpha| (rad)
    """
    alpha = np.asarray(angular_rate, dtype=np.float64) * dt
    return alpha, float(np.sqrt(alpha @ alpha))


def average_attitude_factor(alpha: np.ndarray, magnitude: float,
                            threshold: float = SMALL_ANGLE_THRESHOLD) -> np.ndarray:
    """
    Factor that turns the start-of-interval attitude into the average attitude.

    Parameters
    ----------
    alpha : np.ndarray
        Rotation vector (rad), shape (3,)
    magnitude : float
        |alpha| (rad)
    threshold : float
        Magnitude at or below which the identity is returned

    Returns
    -------
    np.ndarray
        3x3 averaging factor
    """
    if magnitude <= threshold:
        return I3.copy()

    S = skew(alpha)
    mag2 = magnitude * magnitude
    c1 = (1.0 - np.cos(magnitude)) / mag2
    c2 = (1.0 - np.sin(magnitude) / magnitude) / mag2
    return I3 + c1 * S + c2 * (S @ S)


def rotation_matrix(alpha: np.ndarray, magnitude: float,
                    threshold: float = SMALL_ANGLE_THRESHOLD) -> np.ndarray:
    """
    Rotation matrix of a rotation vector.

    Parameters
    ----------
    alpha : np.ndarray
        Rotation vector (rad), shape (3,)
    magnitude : float
        |alpha| (rad)
    threshold : float
        Magnitude at or below which I + skew(alpha) is returned

    Returns
    -------
    np.ndarray
        3x3 rotation matrix
    """
    S = skew(alpha)
    if magnitude <= threshold:
        return I3 + S

    return (I3
            + (np.sin(magnitude) / magnitude) * S
            + ((1.0 - np.cos(magnitude)) / (magnitude * magnitude)) * (S @ S))
