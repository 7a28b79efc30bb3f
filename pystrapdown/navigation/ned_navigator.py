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
Strapdown inertial navigation in the local NED frame.

One call propagates position, velocity and attitude over one IMU interval:

1. The rotation vector alpha = w * dt of the body is formed.
2. The attitude averaged over the interval resolves the specific force in NED,
   corrected for the rotation of the NED frame during the interval.
3. Velocity is integrated with gravity at the old position and the Coriolis
   and transport rate terms.
4. Height, latitude and longitude are integrated with the trapezoidal rule.
   Both latitude terms use the meridian radius at the old latitude.
5. The attitude is rotated by the exact body rotation and by the averaged
   Earth and transport rates, then renormalized by det(C)^(-1/3).

Inputs and outputs are SI values; see pystrapdown.core.units for conversions.

References:
    Groves (2013), Section 5.5 and Eqs. (5.84)-(5.86)
"""

from typing import Callable, Optional

import numpy as np

from ..attitude.dcm import renormalize_dcm
from ..attitude.rodrigues import average_attitude_factor, rotation_matrix, rotation_vector
from ..attitude.skew import skew
from ..coordinate.geodetic import gravity_ned, radii_of_curvature
from ..core.constants import SMALL_ANGLE_THRESHOLD
from ..core.data_structures import (
    BodyKinematics,
    CoordinateTransformation,
    NEDFrame,
    NEDPosition,
    NEDVelocity,
    is_valid_body_to_ned,
)
from ..core.exceptions import InertialNavigatorError, InvalidSourceAndDestinationFrameTypeError
from .rates import earth_rate_ned, transport_rate_ned

__all__ = ['navigate_ned', 'navigate_ned_frame', 'NEDInertialNavigator']

GravityModel = Callable[[float, float], np.ndarray]
RadiiModel = Callable[[float], tuple[float, float]]

I3 = np.eye(3)

# Failures of the linear algebra that are reported as numerical instability
NUMERICAL_ERRORS = (np.linalg.LinAlgError, ArithmeticError, ValueError)


def navigate_ned(time_interval: float,
                 old_latitude: float, old_longitude: float, old_height: float,
                 old_c_body_to_ned: CoordinateTransformation,
                 old_vn: float, old_ve: float, old_vd: float,
                 fx: float, fy: float, fz: float,
                 angular_rate_x: float, angular_rate_y: float, angular_rate_z: float,
                 gravity: GravityModel = gravity_ned,
                 radii: RadiiModel = radii_of_curvature) -> NEDFrame:
    """
    Propagate a navigation state over one IMU interval.

    Parameters
    ----------
    time_interval : float
        Interval between the old and the new epoch (s)
    old_latitude, old_longitude : float
        Previous geodetic latitude and longitude (rad)
    old_height : float
        Previous height above the ellipsoid (m)
    old_c_body_to_ned : CoordinateTransformation
        Previous attitude, tagged body -> local navigation
    old_vn, old_ve, old_vd : float
        Previous NED velocity (m/s)
    fx, fy, fz : float
        Specific force averaged over the interval, body axes (m/s^2)
    angular_rate_x, angular_rate_y, angular_rate_z : float
        Angular rate averaged over the interval, body axes (rad/s)
    gravity : callable, optional
        gravity(lat, h) -> NED gravity vector, WGS84 by default
    radii : callable, optional
        radii(lat) -> (Rn, Re), WGS84 by default

    Returns
    -------
    NEDFrame
        Propagated state

    Raises
    ------
    InvalidSourceAndDestinationFrameTypeError
        If old_c_body_to_ned is not tagged body -> local navigation. Nothing
        is computed in that case.
    InertialNavigatorError
        If the propagation is numerically unstable
    """
    if not is_valid_body_to_ned(old_c_body_to_ned):
        raise InvalidSourceAndDestinationFrameTypeError(
            getattr(old_c_body_to_ned, 'source_type', None),
            getattr(old_c_body_to_ned, 'destination_type', None))

    return _navigate(time_interval, old_latitude, old_longitude, old_height,
                     old_c_body_to_ned.matrix, old_vn, old_ve, old_vd,
                     np.array([fx, fy, fz], dtype=np.float64),
                     np.array([angular_rate_x, angular_rate_y, angular_rate_z], dtype=np.float64),
                     gravity, radii)


def navigate_ned_frame(time_interval: float, old_frame: NEDFrame, kinematics: BodyKinematics,
                       result: Optional[NEDFrame] = None,
                       gravity: GravityModel = gravity_ned,
                       radii: RadiiModel = radii_of_curvature) -> NEDFrame:
    """
    Propagate a NED frame with the body kinematics of one interval.

    A NEDFrame always holds a body-to-NED attitude, so no tag check is made.

    Parameters
    ----------
    time_interval : float
        Interval length (s)
    old_frame : NEDFrame
        Previous state, never modified
    kinematics : BodyKinematics
        Specific force and angular rate averaged over the interval
    result : NEDFrame, optional
        Frame to overwrite with the new state. It must not be shared with
        other threads during the call and is left untouched on failure.

    Returns
    -------
    NEDFrame
        result when given, otherwise a new frame
    """
    new_frame = _navigate(time_interval,
                          old_frame.position.latitude, old_frame.position.longitude,
                          old_frame.position.height, old_frame.c_body_to_ned,
                          old_frame.velocity.vn, old_frame.velocity.ve, old_frame.velocity.vd,
                          kinematics.specific_force, kinematics.angular_rate,
                          gravity, radii)
    if result is None:
        return new_frame

    result.copy_from(new_frame)
    return result


def _navigate(dt, lat, lon, h, old_C, vn, ve, vd, f_b, w_b, gravity, radii) -> NEDFrame:
    try:
        with np.errstate(divide='raise', invalid='raise', over='raise'):
            alpha, mag_alpha = rotation_vector(w_b, dt)

            old_Rn, old_Re = radii(lat)
            w_ie_n = earth_rate_ned(lat)
            old_w_en_n = transport_rate_ned(lat, h, vn, ve, (old_Rn, old_Re))

            # Attitude averaged over the interval, Eqs. (5.84)-(5.86)
            nav_rotation = 0.5 * dt * skew(old_w_en_n + w_ie_n) @ old_C
            if mag_alpha > SMALL_ANGLE_THRESHOLD:
                ave_C = old_C @ average_attitude_factor(alpha, mag_alpha) - nav_rotation
            else:
                ave_C = old_C - nav_rotation

            # Velocity
            f_n = ave_C @ f_b
            g_n = np.asarray(gravity(lat, h), dtype=np.float64)
            if g_n.shape != (3,):
                raise ValueError(f"Gravity model must return a 3D vector, got {g_n.shape}")
            old_v = np.array([vn, ve, vd], dtype=np.float64)
            v = old_v + dt * (f_n + g_n - skew(old_w_en_n + 2.0 * w_ie_n) @ old_v)

            # Position
            new_h = h - 0.5 * dt * (vd + v[2])
            new_lat = lat + 0.5 * dt * (vn / (old_Rn + h) + v[0] / (old_Rn + new_h))
            Rn, Re = radii(new_lat)
            new_lon = lon + 0.5 * dt * (ve / ((old_Re + h) * np.cos(lat)) +
                                        v[1] / ((Re + new_h) * np.cos(new_lat)))

            # Attitude
            w_en_n = transport_rate_ned(new_lat, new_h, v[0], v[1], (Rn, Re))
            C_new_old = rotation_matrix(alpha, mag_alpha)
            ave_w_in_n = w_ie_n + 0.5 * (old_w_en_n + w_en_n)
            C = renormalize_dcm((I3 - dt * skew(ave_w_in_n)) @ old_C @ C_new_old)

            if not (np.all(np.isfinite(v)) and np.all(np.isfinite(C)) and
                    np.isfinite(new_lat) and np.isfinite(new_lon) and np.isfinite(new_h)):
                raise FloatingPointError("Navigation produced non-finite values")
    except NUMERICAL_ERRORS as exc:
        raise InertialNavigatorError() from exc

    return NEDFrame(
        position=NEDPosition(float(new_lat), float(new_lon), float(new_h)),
        velocity=NEDVelocity(float(v[0]), float(v[1]), float(v[2])),
        c_body_to_ned=C,
    )


class NEDInertialNavigator:
    """
    Strapdown navigator in the local NED frame.

    The navigator only holds the Earth models it uses, it keeps no state
    between calls and can be shared between threads as long as each call
    writes to its own result frame.

    Examples
    --------
    >>> navigator = NEDInertialNavigator()
    >>> frame = NEDFrame(position=NEDPosition(latitude=0.72, height=50.0))
    >>> kinematics = BodyKinematics(fz=-9.80)
    >>> new_frame = navigator.navigate_frame(0.01, frame, kinematics)
    """

    def __init__(self, gravity: GravityModel = gravity_ned,
                 radii: RadiiModel = radii_of_curvature):
        self.gravity = gravity
        self.radii = radii

    def navigate(self, time_interval: float,
                 old_latitude: float, old_longitude: float, old_height: float,
                 old_c_body_to_ned: CoordinateTransformation,
                 old_vn: float, old_ve: float, old_vd: float,
                 fx: float, fy: float, fz: float,
                 angular_rate_x: float, angular_rate_y: float,
                 angular_rate_z: float) -> NEDFrame:
        """Propagate SI inputs, see navigate_ned"""
        return navigate_ned(time_interval, old_latitude, old_longitude, old_height,
                            old_c_body_to_ned, old_vn, old_ve, old_vd,
                            fx, fy, fz, angular_rate_x, angular_rate_y, angular_rate_z,
                            gravity=self.gravity, radii=self.radii)

    def navigate_frame(self, time_interval: float, old_frame: NEDFrame,
                       kinematics: BodyKinematics,
                       result: Optional[NEDFrame] = None) -> NEDFrame:
        """Propagate a frame, see navigate_ned_frame"""
        return navigate_ned_frame(time_interval, old_frame, kinematics, result=result,
                                  gravity=self.gravity, radii=self.radii)
