# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
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

"""CreateProfile command DTO."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateProfileCommand:
    """Command to register a new profile.

    Attributes:
        name: Unique profile name.
        timezone: Default IANA zone for the profile.
        correlation_id: Optional request correlation identifier.
    """

    name: str
    timezone: str = "UTC"
    correlation_id: Optional[str] = None
