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

"""Profile entity."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..value_objects import ProfileId, ProfileName


@dataclass(frozen=True)
class Profile:
    """A named participant that events can be assigned to.

    Attributes:
        profile_id: Unique profile identifier.
        name: Unique display name.
        timezone: Default IANA zone for this profile.
        created_at: Creation timestamp.
    """

    profile_id: ProfileId
    name: ProfileName
    timezone: str = "UTC"
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.created_at is None:
            object.__setattr__(self, "created_at", datetime.now(timezone.utc))
