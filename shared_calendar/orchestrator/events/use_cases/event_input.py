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

"""Validation of proposed event input into domain values."""

from typing import Optional

from shared_calendar.core.events.entities import EventState
from shared_calendar.core.events.exceptions import (
    CalendarDomainError,
    EventNotFoundError,
    InvalidInputError,
)
from shared_calendar.core.events.temporal import resolve_zone, to_instant
from shared_calendar.core.events.value_objects import EventId, ProfileId

from ..commands import EventInput


def build_event_state(
    event_input: EventInput,
    correlation_id: Optional[str] = None,
) -> EventState:
    """Validate raw input and convert it into an EventState.

    Checks run before any storage access: title, timezone, dates and
    times, assignment ids, then ordering of the resulting instants.

    Raises:
        InvalidInputError: If the title is empty or a profile id is malformed.
        InvalidTimezoneError: If the timezone is unknown.
        InvalidDateTimeError: If a date or time cannot be parsed.
        InvalidRangeError: If end is not strictly after start.
    """
    title = event_input.title
    if not title or not title.strip():
        raise InvalidInputError("title", "must not be empty", correlation_id)

    try:
        resolve_zone(event_input.timezone)
        start = to_instant(event_input.start_date, event_input.start_time, event_input.timezone)
        end = to_instant(event_input.end_date, event_input.end_time, event_input.timezone)
    except CalendarDomainError as exc:
        exc.correlation_id = exc.correlation_id or correlation_id
        raise

    assigned = []
    for raw_id in event_input.profiles:
        try:
            profile_id = ProfileId(str(raw_id))
        except ValueError as exc:
            raise InvalidInputError("profiles", str(exc), correlation_id) from exc
        if profile_id not in assigned:
            assigned.append(profile_id)

    state = EventState(
        title=title,
        description=event_input.description or "",
        start=start,
        end=end,
        timezone=event_input.timezone,
        assigned_to=tuple(assigned),
    )
    try:
        state.validate_range()
    except CalendarDomainError as exc:
        exc.correlation_id = exc.correlation_id or correlation_id
        raise
    return state


def parse_event_id(raw_id: str, correlation_id: Optional[str] = None) -> EventId:
    """Parse an event id; malformed ids cannot resolve to any event."""
    try:
        return EventId(str(raw_id))
    except ValueError as exc:
        raise EventNotFoundError(str(raw_id), correlation_id) from exc


def parse_profile_id(raw_id: str, correlation_id: Optional[str] = None) -> ProfileId:
    """Parse a profile id used as a query filter."""
    try:
        return ProfileId(str(raw_id))
    except ValueError as exc:
        raise InvalidInputError("profile_id", str(exc), correlation_id) from exc
