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

"""UpdateEvent use case implementation."""

import logging
from typing import Optional

from shared_calendar.core.events.entities import AuditRecord, EventState
from shared_calendar.core.events.exceptions import (
    EventNotFoundError,
    OptimisticLockError,
)
from shared_calendar.core.events.repositories import CalendarStore, IdGenerator
from shared_calendar.core.events.services import DiffEngine
from shared_calendar.core.events.value_objects import EventId

from ..commands import UpdateEventCommand
from ..dtos import EventResponse
from .event_input import build_event_state, parse_event_id

logger = logging.getLogger(__name__)

DEFAULT_RETRY_LIMIT = 3


class UpdateEventUseCase:
    """Use case for updating an event and recording what changed.

    This use case orchestrates event updates with the following guarantees:
    - Validation first: proposed values are checked before storage is touched
    - Semantic diff: changes are computed against the persisted state
    - Atomicity: new state and its audit record commit together or not at all
    - Serialization: updates of one event run one at a time; a write based
      on a superseded version is rejected and recomputed

    Attributes:
        store: Calendar storage handle.
        id_generator: Generator for audit record identifiers.
        retry_limit: Attempts made when a version conflict is detected.
    """

    def __init__(
        self,
        store: CalendarStore,
        id_generator: IdGenerator,
        retry_limit: int = DEFAULT_RETRY_LIMIT,
    ) -> None:
        """Initialize use case with its collaborators.

        Args:
            store: Calendar storage implementation.
            id_generator: Identifier generator for audit records.
            retry_limit: Maximum attempts on optimistic lock conflicts.
        """
        if retry_limit < 1:
            raise ValueError("retry_limit must be at least 1")
        self._store = store
        self._id_generator = id_generator
        self._retry_limit = retry_limit

    def execute(self, command: UpdateEventCommand) -> EventResponse:
        """Execute an event update.

        Args:
            command: UpdateEvent command with the full proposed state.

        Returns:
            EventResponse DTO with the updated event.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidInputError: If the title is empty or a profile id is malformed.
            InvalidTimezoneError: If the timezone is unknown.
            InvalidDateTimeError: If a date or time cannot be parsed.
            InvalidRangeError: If end is not strictly after start.
            OptimisticLockError: If conflicts persist after all retries.
            StorageUnavailableError: If the store cannot be read or written.
        """
        event_id = parse_event_id(command.event_id, command.correlation_id)
        proposed = build_event_state(command.event, command.correlation_id)

        with self._store.lock_event(event_id):
            attempt = 1
            while True:
                try:
                    return self._apply(event_id, proposed, command.correlation_id)
                except OptimisticLockError:
                    if attempt >= self._retry_limit:
                        logger.error(
                            "Giving up on event %s after %d conflicting attempts",
                            event_id, attempt,
                        )
                        raise
                    logger.warning(
                        "Version conflict on event %s, recomputing diff (attempt %d)",
                        event_id, attempt,
                    )
                    attempt += 1

    def _apply(
        self,
        event_id: EventId,
        proposed: EventState,
        correlation_id: Optional[str],
    ) -> EventResponse:
        """Diff, persist and audit one attempt inside a single unit of work."""
        with self._store.unit_of_work() as uow:
            current = uow.events.find_by_id(event_id)
            if current is None:
                raise EventNotFoundError(str(event_id), correlation_id)

            changes = DiffEngine.diff(current.state, proposed)
            updated = current.with_state(proposed)
            uow.events.save(updated, expected_version=current.version)

            if changes:
                uow.audit_records.append(AuditRecord(
                    record_id=self._id_generator.generate(),
                    event_id=event_id,
                    changes=changes,
                    summary=DiffEngine.summarize(changes),
                    created_at=updated.updated_at,
                ))

            profiles = uow.profiles.find_by_ids(updated.assigned_to)

        if changes:
            logger.info(
                "Event %s updated with %d change(s): %s",
                event_id, len(changes), ", ".join(c.field.value for c in changes),
            )
        else:
            logger.info("Event %s updated without tracked changes", event_id)
        return EventResponse.from_entity(updated, profiles)
