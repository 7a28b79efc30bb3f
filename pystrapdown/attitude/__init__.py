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
Attitude module for rotations used by the strapdown mechanization.

This module provides:
- Skew symmetric matrices
- Rotation vector kernels (exact Rodrigues rotation and attitude averaging)
- Direction cosine matrix renormalization and euler angle conversion

All rotations assume right-hand coordinate frames with euler angles in the order
'roll-pitch-yaw' and DCMs with the order of 'ZYX'.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

from .dcm import dcm2euler, orthonormality_error, renormalize_dcm
from .euler import euler2dcm
from .rodrigues import average_attitude_factor, rotation_matrix, rotation_vector
from .skew import deskew, skew

__all__ = [
    'skew', 'deskew',
    'dcm2euler', 'euler2dcm',
    'renormalize_dcm', 'orthonormality_error',
    'rotation_vector', 'average_attitude_factor', 'rotation_matrix',
]
