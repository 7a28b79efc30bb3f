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
Direction cosine matrix utilities.

Euler angles follow the 'roll-pitch-yaw' order and DCMs the 'ZYX' order, so
dcm2euler expects the navigation-to-body matrix C_n_b (the transpose of the
body-to-NED attitude).

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import numpy as np
from numba import njit


@njit(cache=True)
def dcm2euler(C):
    """
    Convert 'ZYX' DCM matrix into corresponding euler angles (roll-pitch-yaw).

    Parameters
    ----------
    C : array_like, shape (3, 3)
        NED-to-body direction cosine matrix

    Returns
    -------
    e : ndarray, shape (3,)
        Euler angles [roll, pitch, yaw] in radians
    """
    e = np.array([np.arctan2(C[1, 2], C[2, 2]),
                  -np.arcsin(min(max(C[0, 2], -1.0), 1.0)),
                  np.arctan2(C[0, 1], C[0, 0])],
                 dtype=np.double)
    return e


def renormalize_dcm(C: np.ndarray) -> np.ndarray:
    """
    Scale a direction cosine matrix so that its determinant is one.

    The attitude update of the mechanization is a truncated series, so the
    propagated matrix is not exactly a rotation. Every element is multiplied
    by det(C)^(-1/3).

    Parameters
    ----------
    C : np.ndarray
        3x3 matrix close to a rotation

    Returns
    -------
    np.ndarray
        Renormalized 3x3 matrix

    Raises
    ------
    np.linalg.LinAlgError
        If the determinant is not a positive finite number
    """
    det = np.linalg.det(C)
    if not np.isfinite(det) or det <= 0.0:
        raise np.linalg.LinAlgError(f"Cannot renormalize matrix with determinant {det}")
    return C * det ** (-1.0 / 3.0)


def orthonormality_error(C: np.ndarray) -> float:
    """Frobenius norm of C @ C.T - I"""
    return float(np.linalg.norm(C @ C.T - np.eye(3)))
