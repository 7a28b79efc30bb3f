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

"""Navigation error types"""

__all__ = [
    'NavigationError',
    'InvalidSourceAndDestinationFrameTypeError',
    'InertialNavigatorError',
    'InvalidConfigurationError',
]


class NavigationError(Exception):
    """Base class for all pystrapdown errors"""


class InvalidSourceAndDestinationFrameTypeError(NavigationError):
    def __init__(self, source_type=None, destination_type=None):
        if source_type is None and destination_type is None:
            message = "coordinate transformation must map body frame to local navigation frame."
        else:
            message = (
                f"coordinate transformation tagged {source_type} -> {destination_type}, "
                "expected body frame -> local navigation frame."
            )
        self.message = message
        self.source_type = source_type
        self.destination_type = destination_type
        super().__init__(self.message)


class InertialNavigatorError(NavigationError):
    def __init__(self, message: str = "navigation failed due to numerical instability."):
        self.message = message
        super().__init__(self.message)


class InvalidConfigurationError(NavigationError):
    def __init__(self, config_name: str, reason: str):
        message = f"invalid configuration in {config_name}: {reason}."
        self.message = message
        super().__init__(self.message)
