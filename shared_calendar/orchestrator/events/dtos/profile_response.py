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

"""Profile response DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileResponse:
    """Response DTO for profile operations."""

    profile_id: str
    name: str
    timezone: str
    created_at: str

    @staticmethod
    def from_entity(profile) -> "ProfileResponse":
        return ProfileResponse(
            profile_id=str(profile.profile_id),
            name=str(profile.name),
            timezone=profile.timezone,
            created_at=profile.created_at.isoformat(),
        )
