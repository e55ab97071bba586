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

"""Event aggregate root entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import FrozenSet, Optional, Tuple

from ..exceptions import InvalidRangeError
from ..temporal import compare_instants
from ..value_objects import EventId, Ordering, ProfileId


@dataclass(frozen=True)
class EventState:
    """Snapshot of the mutable fields of an event.

    Attributes:
        title: Event title.
        description: Free text, may be empty.
        start: Start instant (UTC).
        end: End instant (UTC).
        timezone: IANA zone the event was authored in.
        assigned_to: Assigned profile ids in display order.
    """

    title: str
    description: str
    start: datetime
    end: datetime
    timezone: str
    assigned_to: Tuple[ProfileId, ...] = field(default_factory=tuple)

    def assigned_set(self) -> FrozenSet[str]:
        """Return assigned profile ids as a set, leaving the tuple untouched."""
        return frozenset(str(profile_id) for profile_id in self.assigned_to)

    def validate_range(self) -> None:
        """Ensure the end instant is strictly after the start instant.

        Raises:
            InvalidRangeError: If end <= start.
        """
        if compare_instants(self.start, self.end) != Ordering.BEFORE:
            raise InvalidRangeError(
                start=self.start.isoformat(),
                end=self.end.isoformat(),
            )


@dataclass
class Event:
    """Event aggregate root.

    Holds the committed state of a calendar event plus bookkeeping for
    optimistic locking.

    Attributes:
        event_id: Unique event identifier.
        state: Current committed field values.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        version: Optimistic locking version.
    """

    event_id: EventId
    state: EventState
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: int = 1

    def __post_init__(self) -> None:
        self.state.validate_range()
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)
        if self.updated_at is None:
            self.updated_at = self.created_at

    @property
    def title(self) -> str:
        return self.state.title

    @property
    def start(self) -> datetime:
        return self.state.start

    @property
    def end(self) -> datetime:
        return self.state.end

    @property
    def timezone(self) -> str:
        return self.state.timezone

    @property
    def assigned_to(self) -> Tuple[ProfileId, ...]:
        return self.state.assigned_to

    def with_state(self, proposed: EventState) -> "Event":
        """Return the next version of this event carrying ``proposed``.

        The receiver is left untouched so a failed write never leaves a
        half-updated aggregate behind. ``updated_at`` never moves backwards,
        even if the wall clock does.

        Raises:
            InvalidRangeError: If the proposed range is not ordered.
        """
        proposed.validate_range()
        return replace(
            self,
            state=proposed,
            updated_at=max(datetime.now(timezone.utc), self.updated_at),
            version=self.version + 1,
        )
