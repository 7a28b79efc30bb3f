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

"""Strapdown inertial navigation in the local NED frame"""

from .kinematics import estimate_kinematics_frames, estimate_kinematics_ned
from .ned_navigator import NEDInertialNavigator, navigate_ned, navigate_ned_frame
from .rates import earth_rate_ned, transport_rate_ned
from .trajectory import TrajectoryConfig, propagate_trajectory

__all__ = [
    'NEDInertialNavigator', 'navigate_ned', 'navigate_ned_frame',
    'estimate_kinematics_ned', 'estimate_kinematics_frames',
    'earth_rate_ned', 'transport_rate_ned',
    'TrajectoryConfig', 'propagate_trajectory',
]
