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

"""Read-side use cases for events."""

from typing import List, Optional

from shared_calendar.core.events.exceptions import EventNotFoundError
from shared_calendar.core.events.repositories import CalendarStore

from ..dtos import EventResponse
from .event_input import parse_event_id, parse_profile_id


class GetEventUseCase:
    """Use case returning a single event with resolved assignments."""

    def __init__(self, store: CalendarStore) -> None:
        self._store = store

    def execute(self, event_id: str, correlation_id: Optional[str] = None) -> EventResponse:
        """Return one event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        parsed_id = parse_event_id(event_id, correlation_id)
        with self._store.unit_of_work() as uow:
            event = uow.events.find_by_id(parsed_id)
            if event is None:
                raise EventNotFoundError(event_id, correlation_id)
            profiles = uow.profiles.find_by_ids(event.assigned_to)
        return EventResponse.from_entity(event, profiles)


class ListEventsUseCase:
    """Use case listing events by start instant, optionally for one profile."""

    def __init__(self, store: CalendarStore) -> None:
        self._store = store

    def execute(
        self,
        profile_id: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ) -> List[EventResponse]:
        """Return events ordered by start instant ascending.

        Args:
            profile_id: When given, only events assigned to this profile.
            correlation_id: Optional request correlation identifier.

        Raises:
            InvalidInputError: If ``profile_id`` is malformed.
        """
        filter_id = None
        if profile_id:
            filter_id = parse_profile_id(profile_id, correlation_id)

        with self._store.unit_of_work() as uow:
            events = uow.events.list_all(filter_id)
            referenced = {pid for event in events for pid in event.assigned_to}
            profiles = uow.profiles.find_by_ids(sorted(referenced, key=str))

        return [EventResponse.from_entity(event, profiles) for event in events]
