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

"""Earth Model and Navigation Constants"""

import numpy as np

# Earth Parameters (WGS84)
RE_WGS84 = 6378137.0           # earth semimajor axis (m)
RP_WGS84 = 6356752.31425       # polar radius (semi-minor axis) (m)
FE_WGS84 = 1.0 / 298.257223563 # earth flattening
E_WGS84 = 0.0818191908425      # WGS84 eccentricity
E2_WGS84 = E_WGS84 * E_WGS84   # WGS84 eccentricity squared
GM_WGS84 = 3.986004418E14      # earth gravitational constant (m^3/s^2)

# Earth rotation rate used by the mechanization (rad/s)
EARTH_ROTATION_RATE = 7.292115E-5

# Normal gravity (Somigliana) parameters
EQUATORIAL_GRAVITY = 9.7803253359      # gravity at equator (m/s^2)
SOMIGLIANA_K = 0.001931853             # Somigliana constant
NORTH_GRAVITY_HEIGHT_COEFFICIENT = 8.08E-9  # north gravity per meter of height (1/s^2)

# Gravity constant
G_GRAVITY = 9.80665            # standard gravity (m/s^2)

# Rotation vector magnitude below which first order expansions are used (rad)
SMALL_ANGLE_THRESHOLD = 1E-8

# Attitude increment below which the estimator skips the phi/sin(phi) scaling (rad)
KINEMATICS_SCALING_THRESHOLD = 2E-5

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians
