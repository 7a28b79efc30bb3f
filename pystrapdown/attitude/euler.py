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

"""Attitude conversion from euler angles."""

import numpy as np
from numba import njit


@njit(cache=True)
def euler2dcm(e):
    """
    Convert euler angles (roll-pitch-yaw) to corresponding 'ZYX' DCM.

    The rotation sequence is yaw about z, pitch about y, then roll about x.
    The result maps NED vectors into the body frame (C_n_b); its transpose is
    the body-to-NED attitude.

    Parameters
    ----------
    e : ndarray, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians

    Returns
    -------
    C : ndarray, shape (3, 3)
        NED-to-body direction cosine matrix
    """
    sinP, sinT, sinS = np.sin(e)
    cosP, cosT, cosS = np.cos(e)
    C = np.array([[cosT*cosS, cosT*sinS, -sinT],
                  [sinP*sinT*cosS - cosP*sinS, sinP*sinT*sinS + cosP*cosS, cosT*sinP],
                  [sinT*cosP*cosS + sinS*sinP, sinT*cosP*sinS - cosS*sinP, cosT*cosP]],
                 dtype=np.double)
    return C
