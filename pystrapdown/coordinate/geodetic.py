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

"""Earth curvature and gravity models on the WGS84 ellipsoid"""


import numpy as np

from ..core.constants import (
    E2_WGS84,
    EARTH_ROTATION_RATE,
    EQUATORIAL_GRAVITY,
    FE_WGS84,
    GM_WGS84,
    NORTH_GRAVITY_HEIGHT_COEFFICIENT,
    RE_WGS84,
    RP_WGS84,
    SOMIGLIANA_K,
)

__all__ = ['radii_of_curvature', 'gravity_model', 'gravity_ned']


def radii_of_curvature(lat: float) -> tuple[float, float]:
    """
    Compute radii of curvature at given latitude

    Parameters:
    -----------
    lat : float
        Latitude (rad)

    Returns:
    --------
    Rn : float
        Meridian radius of curvature (m)
    Re : float
        Transverse (prime vertical) radius of curvature (m)
    """
    sin_lat = np.sin(lat)
    temp = 1.0 - E2_WGS84 * sin_lat**2

    # Meridian radius
    Rn = RE_WGS84 * (1.0 - E2_WGS84) / temp**1.5

    # Transverse radius
    Re = RE_WGS84 / np.sqrt(temp)

    return float(Rn), float(Re)


def gravity_model(lat: float, h: float) -> float:
    """
    Compute local gravity magnitude using WGS84 gravity model

    Parameters:
    -----------
    lat : float
        Latitude (rad)
    h : float
        Height above ellipsoid (m)

    Returns:
    --------
    g : float
        Local gravity (m/s^2)
    """
    return float(np.linalg.norm(gravity_ned(lat, h)))


def gravity_ned(lat: float, h: float) -> np.ndarray:
    """
    Compute the acceleration due to gravity resolved along NED axes

    Gravity here is the plumb-bob gravity, i.e. the gravitational
    attraction plus the centrifugal term of the Earth rotation, which is
    what an accelerometer at rest reads with opposite sign.

    Parameters:
    -----------
    lat : float
        Latitude (rad)
    h : float
        Height above ellipsoid (m)

    Returns:
    --------
    g_n : np.ndarray
        Gravity vector [north, east, down] (m/s^2)

    Notes:
    ------
    Surface gravity follows the Somigliana formula, the height dependence is
    the second order expansion of Groves (2013), Eqs. (2.139)-(2.140).
    """
    sinsq_lat = np.sin(lat)**2

    # Normal gravity at ellipsoid surface (Somigliana formula)
    g0 = EQUATORIAL_GRAVITY * (1.0 + SOMIGLIANA_K * sinsq_lat) / \
        np.sqrt(1.0 - E2_WGS84 * sinsq_lat)

    g_n = np.zeros(3, dtype=np.float64)
    g_n[0] = -NORTH_GRAVITY_HEIGHT_COEFFICIENT * h * np.sin(2.0 * lat)
    g_n[2] = g0 * (1.0 - (2.0 / RE_WGS84) *
                   (1.0 + FE_WGS84 * (1.0 - 2.0 * sinsq_lat) +
                    (EARTH_ROTATION_RATE**2 * RE_WGS84**2 * RP_WGS84 / GM_WGS84)) * h +
                   (3.0 * h**2 / RE_WGS84**2))

    return g_n
