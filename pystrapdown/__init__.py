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
pystrapdown - Strapdown inertial navigation in the local NED frame

A Python library for propagating position, velocity and attitude from IMU
measurements: rotation-vector attitude kernels, WGS84 Earth models, the NED
mechanization and its inverse, and trajectory propagation over IMU logs.
"""

__version__ = "1.0.0"
__author__ = "pystrapdown Development Team"
__title__ = "pystrapdown"
__description__ = "Strapdown inertial navigation in the local NED frame"

from .core import *
from .attitude import *
from .coordinate import *
from .navigation import *
