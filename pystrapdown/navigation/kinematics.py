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
Body kinematics estimation from two consecutive NED states.

This is the inverse of the NED navigator: given the state at the start and
at the end of an interval it recovers the specific force and angular rate
an ideal IMU would have measured. It is used to synthesize IMU samples from
reference trajectories and to check the navigator.

References:
    Groves (2013), Section 5.5 and Appendix E
"""

import numpy as np
import scipy.linalg

from ..attitude.rodrigues import average_attitude_factor
from ..attitude.skew import skew
from ..coordinate.geodetic import gravity_ned, radii_of_curvature
from ..core.constants import KINEMATICS_SCALING_THRESHOLD, SMALL_ANGLE_THRESHOLD
from ..core.data_structures import (
    BodyKinematics,
    CoordinateTransformation,
    NEDFrame,
    is_valid_body_to_ned,
)
from ..core.exceptions import InertialNavigatorError, InvalidSourceAndDestinationFrameTypeError
from .ned_navigator import NUMERICAL_ERRORS, GravityModel, RadiiModel
from .rates import earth_rate_ned, transport_rate_ned

__all__ = ['estimate_kinematics_ned', 'estimate_kinematics_frames']

I3 = np.eye(3)


def estimate_kinematics_ned(time_interval: float,
                            c_body_to_ned: CoordinateTransformation,
                            old_c_body_to_ned: CoordinateTransformation,
                            vn: float, ve: float, vd: float,
                            old_vn: float, old_ve: float, old_vd: float,
                            latitude: float, height: float,
                            old_latitude: float, old_height: float,
                            gravity: GravityModel = gravity_ned,
                            radii: RadiiModel = radii_of_curvature) -> BodyKinematics:
    """
    Estimate the body kinematics that move a NED state into another one.

    Parameters
    ----------
    time_interval : float
        Interval between both states (s), must be positive
    c_body_to_ned, old_c_body_to_ned : CoordinateTransformation
        Current and previous attitude, tagged body -> local navigation
    vn, ve, vd : float
        Current NED velocity (m/s)
    old_vn, old_ve, old_vd : float
        Previous NED velocity (m/s)
    latitude, height : float
        Current latitude (rad) and height (m)
    old_latitude, old_height : float
        Previous latitude (rad) and height (m)

    Returns
    -------
    BodyKinematics
        Specific force and angular rate averaged over the interval

    Raises
    ------
    ValueError
        If time_interval is not positive
    InvalidSourceAndDestinationFrameTypeError
        If either attitude is not tagged body -> local navigation
    InertialNavigatorError
        If the estimation is numerically unstable
    """
    if not time_interval > 0.0:
        raise ValueError(f"time_interval must be positive, got {time_interval}")
    for transformation in (c_body_to_ned, old_c_body_to_ned):
        if not is_valid_body_to_ned(transformation):
            raise InvalidSourceAndDestinationFrameTypeError(
                getattr(transformation, 'source_type', None),
                getattr(transformation, 'destination_type', None))

    dt = time_interval
    C = c_body_to_ned.matrix
    old_C = old_c_body_to_ned.matrix

    try:
        with np.errstate(divide='raise', invalid='raise', over='raise'):
            w_ie_n = earth_rate_ned(old_latitude)
            w_en_n = transport_rate_ned(latitude, height, vn, ve, radii(latitude))
            old_w_en_n = transport_rate_ned(old_latitude, old_height, old_vn, old_ve,
                                            radii(old_latitude))

            # Attitude increment with respect to an inertial frame
            C_old_new = C.T @ (I3 - skew(w_ie_n + 0.5 * w_en_n + 0.5 * old_w_en_n) * dt) @ old_C
            alpha = 0.5 * np.array([C_old_new[1, 2] - C_old_new[2, 1],
                                    C_old_new[2, 0] - C_old_new[0, 2],
                                    C_old_new[0, 1] - C_old_new[1, 0]], dtype=np.float64)

            # sin(phi) -> phi
            cos_phi = np.clip(0.5 * (np.trace(C_old_new) - 1.0), -1.0, 1.0)
            phi = np.arccos(cos_phi)
            if phi > KINEMATICS_SCALING_THRESHOLD:
                alpha = alpha * phi / np.sin(phi)

            w_b = alpha / dt

            # Specific force in NED
            v = np.array([vn, ve, vd], dtype=np.float64)
            old_v = np.array([old_vn, old_ve, old_vd], dtype=np.float64)
            g_n = np.asarray(gravity(old_latitude, old_height), dtype=np.float64)
            f_n = (v - old_v) / dt - g_n + skew(old_w_en_n + 2.0 * w_ie_n) @ old_v

            # Average attitude over the interval, as in the navigator
            mag_alpha = float(np.sqrt(alpha @ alpha))
            nav_rotation = 0.5 * dt * skew(old_w_en_n + w_ie_n) @ old_C
            if mag_alpha > SMALL_ANGLE_THRESHOLD:
                ave_C = old_C @ average_attitude_factor(alpha, mag_alpha) - nav_rotation
            else:
                ave_C = old_C - nav_rotation

            f_b = scipy.linalg.solve(ave_C, f_n)
            if not (np.all(np.isfinite(f_b)) and np.all(np.isfinite(w_b))):
                raise FloatingPointError("Kinematics estimation produced non-finite values")
    except NUMERICAL_ERRORS as exc:
        raise InertialNavigatorError("kinematics estimation failed due to numerical instability.") from exc

    return BodyKinematics.from_arrays(f_b, w_b)


def estimate_kinematics_frames(time_interval: float, frame: NEDFrame,
                               old_frame: NEDFrame, **models) -> BodyKinematics:
    """Estimate the body kinematics between two NED frames"""
    return estimate_kinematics_ned(
        time_interval,
        frame.coordinate_transformation, old_frame.coordinate_transformation,
        frame.velocity.vn, frame.velocity.ve, frame.velocity.vd,
        old_frame.velocity.vn, old_frame.velocity.ve, old_frame.velocity.vd,
        frame.position.latitude, frame.position.height,
        old_frame.position.latitude, old_frame.position.height,
        **models)
