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

"""Angular rates of the local navigation frame"""

from typing import Optional

import numpy as np

from ..coordinate.geodetic import radii_of_curvature
from ..core.constants import EARTH_ROTATION_RATE


def earth_rate_ned(lat: float) -> np.ndarray:
    """
    Rotation of the ECEF frame with respect to inertial space, resolved in NED

    Parameters:
    -----------
    lat : float
        Latitude (rad)

    Returns:
    --------
    w_ie_n : np.ndarray
        [Omega*cos(lat), 0, -Omega*sin(lat)] (rad/s)
    """
    return np.array([EARTH_ROTATION_RATE * np.cos(lat),
                     0.0,
                     -EARTH_ROTATION_RATE * np.sin(lat)], dtype=np.float64)


def transport_rate_ned(lat: float, h: float, vn: float, ve: float,
                       radii: Optional[tuple[float, float]] = None) -> np.ndarray:
    """
    Rotation of the NED frame with respect to the ECEF frame, resolved in NED

    The local-level frame turns as the platform moves over the curved Earth.

    Parameters:
    -----------
    lat : float
        Latitude (rad)
    h : float
        Height above ellipsoid (m)
    vn, ve : float
        North and east velocity (m/s)
    radii : tuple[float, float], optional
        (Rn, Re) radii of curvature at lat, computed when not given

    Returns:
    --------
    w_en_n : np.ndarray
        Transport rate (rad/s)
    """
    if radii is None:
        radii = radii_of_curvature(lat)
    Rn, Re = radii

    return np.array([ve / (Re + h),
                     -vn / (Rn + h),
                     -ve * np.tan(lat) / (Re + h)], dtype=np.float64)
