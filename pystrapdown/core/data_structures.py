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

"""Core data structures for strapdown navigation"""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from ..attitude.dcm import dcm2euler
from ..attitude.euler import euler2dcm
from .exceptions import InvalidSourceAndDestinationFrameTypeError

__all__ = [
    'FrameType', 'CoordinateTransformation', 'is_valid_body_to_ned',
    'NEDPosition', 'NEDVelocity', 'BodyKinematics', 'NEDFrame',
]


class FrameType(Enum):
    """Reference frames a coordinate transformation can relate.

    Attributes
    ----------
    BODY_FRAME : int
        Frame attached to the IMU (x forward, y right, z down)
    LOCAL_NAVIGATION_FRAME : int
        Local-level North-East-Down frame at the current position
    EARTH_CENTERED_EARTH_FIXED_FRAME : int
        ECEF frame
    EARTH_CENTERED_INERTIAL_FRAME : int
        ECI frame
    """
    BODY_FRAME = 1
    LOCAL_NAVIGATION_FRAME = 2
    EARTH_CENTERED_EARTH_FIXED_FRAME = 3
    EARTH_CENTERED_INERTIAL_FRAME = 4


@dataclass
class CoordinateTransformation:
    """3x3 transformation matrix tagged with the frames it relates.

    Attributes
    ----------
    matrix : np.ndarray
        Matrix mapping vectors resolved in the source frame to the
        destination frame, shape (3, 3)
    source_type : FrameType
        Frame the matrix transforms from
    destination_type : FrameType
        Frame the matrix transforms to

    Notes
    -----
    Only the shape and finiteness of the matrix are checked on construction.
    Use is_valid() to check that it is a proper rotation.
    """
    matrix: np.ndarray
    source_type: FrameType = FrameType.BODY_FRAME
    destination_type: FrameType = FrameType.LOCAL_NAVIGATION_FRAME

    def __post_init__(self):
        self.matrix = np.array(self.matrix, dtype=np.float64)
        if self.matrix.shape != (3, 3):
            raise ValueError(f"Transformation matrix must be 3x3, got {self.matrix.shape}")
        if not np.all(np.isfinite(self.matrix)):
            raise ValueError("Transformation matrix contains non-finite values")
        if not isinstance(self.source_type, FrameType) or \
                not isinstance(self.destination_type, FrameType):
            raise ValueError("Source and destination must be FrameType values")

    @classmethod
    def body_to_ned(cls, matrix: np.ndarray) -> 'CoordinateTransformation':
        """Tag a matrix as a body-to-NED attitude"""
        return cls(matrix, FrameType.BODY_FRAME, FrameType.LOCAL_NAVIGATION_FRAME)

    @classmethod
    def from_euler_angles(cls, roll: float, pitch: float, yaw: float) -> 'CoordinateTransformation':
        """Body-to-NED attitude from roll, pitch and yaw (rad)"""
        C_n_b = euler2dcm(np.array([roll, pitch, yaw], dtype=np.float64))
        return cls.body_to_ned(C_n_b.T)

    def euler_angles(self) -> np.ndarray:
        """
        Roll, pitch and yaw of a body-to-NED attitude.

        Returns
        -------
        np.ndarray
            [roll, pitch, yaw] (rad)
        """
        return dcm2euler(self.matrix.T)

    def inverse(self) -> 'CoordinateTransformation':
        """Transpose of the matrix with the frame tags swapped"""
        return CoordinateTransformation(self.matrix.T.copy(),
                                        self.destination_type, self.source_type)

    def is_valid(self, threshold: float = 1e-6) -> bool:
        """
        Check that the matrix is a proper rotation.

        Parameters
        ----------
        threshold : float
            Maximum Frobenius norm of C @ C.T - I

        Returns
        -------
        bool
            True if the matrix is orthonormal within threshold and det > 0
        """
        error = np.linalg.norm(self.matrix @ self.matrix.T - np.eye(3))
        return bool(error < threshold and np.linalg.det(self.matrix) > 0.0)


def is_valid_body_to_ned(transformation: CoordinateTransformation) -> bool:
    """
    Check the declared role of an attitude.

    Only the frame tags are checked, never the numerical content. Objects
    without frame tags (e.g. a bare numpy array) are not valid.

    Returns
    -------
    bool
        True if the transformation maps the body frame to the local
        navigation frame
    """
    return (getattr(transformation, 'source_type', None) == FrameType.BODY_FRAME and
            getattr(transformation, 'destination_type', None) == FrameType.LOCAL_NAVIGATION_FRAME)


@dataclass
class NEDPosition:
    """Geodetic position.

    Attributes
    ----------
    latitude : float
        Geodetic latitude (rad)
    longitude : float
        Longitude (rad), not wrapped
    height : float
        Height above the WGS84 ellipsoid (m), positive up
    """
    latitude: float = 0.0
    longitude: float = 0.0
    height: float = 0.0

    def as_array(self) -> np.ndarray:
        return np.array([self.latitude, self.longitude, self.height], dtype=np.float64)


@dataclass
class NEDVelocity:
    """Velocity resolved along local North, East and Down axes (m/s)"""
    vn: float = 0.0
    ve: float = 0.0
    vd: float = 0.0

    def as_array(self) -> np.ndarray:
        return np.array([self.vn, self.ve, self.vd], dtype=np.float64)

    def norm(self) -> float:
        return float(np.sqrt(self.vn**2 + self.ve**2 + self.vd**2))


@dataclass
class BodyKinematics:
    """
    IMU measurements averaged over a navigation step.

    Attributes
    ----------
    fx, fy, fz : float
        Specific force resolved along body axes (m/s^2)
    angular_rate_x, angular_rate_y, angular_rate_z : float
        Angular rate of the body with respect to inertial space, resolved
        along body axes (rad/s)

    Examples
    --------
    >>> kinematics = BodyKinematics(fz=-9.81)
    >>> kinematics.specific_force_norm()
    9.81
    """
    fx: float = 0.0
    fy: float = 0.0
    fz: float = 0.0
    angular_rate_x: float = 0.0
    angular_rate_y: float = 0.0
    angular_rate_z: float = 0.0

    @classmethod
    def from_arrays(cls, specific_force: np.ndarray, angular_rate: np.ndarray) -> 'BodyKinematics':
        f = np.asarray(specific_force, dtype=np.float64)
        w = np.asarray(angular_rate, dtype=np.float64)
        if f.shape != (3,) or w.shape != (3,):
            raise ValueError("Specific force and angular rate must be 3D vectors")
        return cls(float(f[0]), float(f[1]), float(f[2]),
                   float(w[0]), float(w[1]), float(w[2]))

    @property
    def specific_force(self) -> np.ndarray:
        return np.array([self.fx, self.fy, self.fz], dtype=np.float64)

    @property
    def angular_rate(self) -> np.ndarray:
        return np.array([self.angular_rate_x, self.angular_rate_y, self.angular_rate_z],
                        dtype=np.float64)

    def specific_force_norm(self) -> float:
        return float(np.linalg.norm(self.specific_force))

    def angular_rate_norm(self) -> float:
        return float(np.linalg.norm(self.angular_rate))

    def equals(self, other: 'BodyKinematics', threshold: float = 0.0) -> bool:
        """Component-wise comparison within an absolute threshold"""
        if other is None:
            return False
        return bool(np.all(np.abs(self.specific_force - other.specific_force) <= threshold) and
                    np.all(np.abs(self.angular_rate - other.angular_rate) <= threshold))


@dataclass
class NEDFrame:
    """
    Full navigation state: position, NED velocity and body-to-NED attitude.

    The attitude is kept as a plain matrix that always means body-to-NED, so
    a frame never holds a wrongly tagged attitude. The tagged form is
    available through coordinate_transformation.

    Attributes
    ----------
    position : NEDPosition
        Geodetic position
    velocity : NEDVelocity
        NED velocity
    c_body_to_ned : np.ndarray
        Body-to-NED direction cosine matrix, shape (3, 3)
    """
    position: NEDPosition = field(default_factory=NEDPosition)
    velocity: NEDVelocity = field(default_factory=NEDVelocity)
    c_body_to_ned: np.ndarray = field(default_factory=lambda: np.eye(3))

    def __post_init__(self):
        self.c_body_to_ned = np.array(self.c_body_to_ned, dtype=np.float64)
        if self.c_body_to_ned.shape != (3, 3):
            raise ValueError(f"Attitude must be 3x3, got {self.c_body_to_ned.shape}")

    @classmethod
    def from_transformation(cls, position: NEDPosition, velocity: NEDVelocity,
                            transformation: CoordinateTransformation) -> 'NEDFrame':
        """
        Build a frame from a tagged attitude.

        Raises
        ------
        InvalidSourceAndDestinationFrameTypeError
            If the attitude is not tagged body -> local navigation
        """
        if not is_valid_body_to_ned(transformation):
            raise InvalidSourceAndDestinationFrameTypeError(
                getattr(transformation, 'source_type', None),
                getattr(transformation, 'destination_type', None))
        return cls(position, velocity, transformation.matrix)

    @property
    def coordinate_transformation(self) -> CoordinateTransformation:
        return CoordinateTransformation.body_to_ned(self.c_body_to_ned)

    def as_array(self) -> np.ndarray:
        """[lat, lon, height, vn, ve, vd]"""
        return np.concatenate([self.position.as_array(), self.velocity.as_array()])

    def copy(self) -> 'NEDFrame':
        return NEDFrame(
            position=NEDPosition(self.position.latitude, self.position.longitude,
                                 self.position.height),
            velocity=NEDVelocity(self.velocity.vn, self.velocity.ve, self.velocity.vd),
            c_body_to_ned=self.c_body_to_ned.copy(),
        )

    def copy_from(self, other: 'NEDFrame'):
        """Overwrite this frame with the contents of another one"""
        self.position = NEDPosition(other.position.latitude, other.position.longitude,
                                    other.position.height)
        self.velocity = NEDVelocity(other.velocity.vn, other.velocity.ve, other.velocity.vd)
        self.c_body_to_ned = other.c_body_to_ned.copy()
