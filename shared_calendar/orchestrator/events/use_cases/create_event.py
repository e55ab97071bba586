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

"""CreateEvent use case implementation."""

import logging

from shared_calendar.core.events.entities import Event
from shared_calendar.core.events.repositories import CalendarStore, IdGenerator
from shared_calendar.core.events.value_objects import EventId

from ..commands import CreateEventCommand
from ..dtos import EventResponse
from .event_input import build_event_state

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """Use case for creating a new calendar event.

    This use case orchestrates event creation with the following guarantees:
    - Validation first: nothing is written for invalid input
    - Ordered range: end is strictly after start, compared as instants
    - No audit record: a new event has no prior state to diff against

    Attributes:
        store: Calendar storage handle.
        id_generator: Generator for new event identifiers.
    """

    def __init__(self, store: CalendarStore, id_generator: IdGenerator) -> None:
        """Initialize use case with its collaborators.

        Args:
            store: Calendar storage implementation.
            id_generator: Identifier generator to use.
        """
        self._store = store
        self._id_generator = id_generator

    def execute(self, command: CreateEventCommand) -> EventResponse:
        """Execute event creation.

        Args:
            command: CreateEvent command with proposed field values.

        Returns:
            EventResponse DTO with the created event.

        Raises:
            InvalidInputError: If the title is empty or a profile id is malformed.
            InvalidTimezoneError: If the timezone is unknown.
            InvalidDateTimeError: If a date or time cannot be parsed.
            InvalidRangeError: If end is not strictly after start.
            StorageUnavailableError: If the store cannot be written.
        """
        state = build_event_state(command.event, command.correlation_id)
        event = Event(event_id=EventId(self._id_generator.generate()), state=state)

        with self._store.unit_of_work() as uow:
            uow.events.add(event)
            profiles = uow.profiles.find_by_ids(event.assigned_to)

        logger.info("Event created: %s", event.event_id)
        return EventResponse.from_entity(event, profiles)
