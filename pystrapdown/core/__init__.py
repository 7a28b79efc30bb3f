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

"""Core Navigation Module.

This module provides the fundamental components shared by the navigation
algorithms:

- **Constants**: WGS84 Earth model, Earth rotation rate, normal gravity
  parameters and the small-angle threshold of the rotation kernels
- **Data Structures**: frame tags, tagged coordinate transformations,
  geodetic position, NED velocity, body kinematics and the full NED frame
- **Exceptions**: frame tagging and numerical instability errors
- **Units**: explicit conversions from common units to SI

Example Usage:
    >>> from pystrapdown.core import *
    >>>
    >>> frame = NEDFrame(position=NEDPosition(latitude=0.7, height=100.0))
    >>> kinematics = BodyKinematics(fz=-9.80)
    >>> lat = angle_to_radians(41.38, AngleUnit.DEGREES)
"""

from .constants import *
from .data_structures import *
from .exceptions import *
from .units import *
