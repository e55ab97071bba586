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

"""Event response DTO."""

from dataclasses import dataclass
from typing import Dict, Iterable, List

from shared_calendar.core.events.temporal import format_for_zone


@dataclass(frozen=True)
class AssignedProfile:
    """Resolved assignment reference."""

    profile_id: str
    name: str


@dataclass(frozen=True)
class EventResponse:
    """Response DTO for event operations.

    Immutable data transfer object for returning event information
    to the API layer. All timestamps are ISO 8601 formatted strings;
    ``start_local`` and ``end_local`` render the instants in the event's
    authoring timezone.

    Attributes:
        event_id: Unique event identifier.
        title: Event title.
        description: Event description.
        start: Start instant (ISO 8601, UTC).
        end: End instant (ISO 8601, UTC).
        start_local: Start rendered in ``timezone``.
        end_local: End rendered in ``timezone``.
        timezone: Authoring IANA timezone.
        assigned_to: Assigned profiles, in display order.
        created_at: Creation timestamp (ISO 8601).
        updated_at: Last modification timestamp (ISO 8601).
        version: Optimistic locking version.
    """

    event_id: str
    title: str
    description: str
    start: str
    end: str
    start_local: str
    end_local: str
    timezone: str
    assigned_to: List[AssignedProfile]
    created_at: str
    updated_at: str
    version: int

    @staticmethod
    def from_entity(event, profiles: Iterable = ()) -> "EventResponse":
        """Create response DTO from an Event entity.

        Args:
            event: Event domain entity.
            profiles: Profiles resolved for the event's assignment ids.
                Ids without a matching profile are reported with an
                empty name.

        Returns:
            EventResponse DTO with serialized values.
        """
        names: Dict[str, str] = {
            str(profile.profile_id): str(profile.name) for profile in profiles
        }
        return EventResponse(
            event_id=str(event.event_id),
            title=event.title,
            description=event.state.description,
            start=event.start.isoformat(),
            end=event.end.isoformat(),
            start_local=format_for_zone(event.start, event.timezone),
            end_local=format_for_zone(event.end, event.timezone),
            timezone=event.timezone,
            assigned_to=[
                AssignedProfile(profile_id=str(pid), name=names.get(str(pid), ""))
                for pid in event.assigned_to
            ],
            created_at=event.created_at.isoformat(),
            updated_at=event.updated_at.isoformat(),
            version=event.version,
        )
