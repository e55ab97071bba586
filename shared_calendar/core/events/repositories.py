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

"""Repository port interfaces (Protocols) for the Events domain.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

from typing import ContextManager, Iterable, List, Optional, Protocol

from .entities import AuditRecord, Event, Profile
from .value_objects import EventId, ProfileId


class IdGenerator(Protocol):
    """Generator port for creating time-ordered identifiers."""

    def generate(self) -> str:
        """Generate a new UUID v7 string.

        Returns:
            A new, unique identifier.
        """
        ...


class EventRepository(Protocol):
    """Repository port for Event aggregate persistence."""

    def add(self, event: Event) -> None:
        """Persist a newly created event.

        Args:
            event: Event entity to persist.
        """
        ...

    def save(self, event: Event, expected_version: int) -> None:
        """Persist a new version of an existing event.

        Args:
            event: Event entity carrying the new state.
            expected_version: Version the change was computed against.

        Raises:
            OptimisticLockError: If the stored version differs.
            EventNotFoundError: If the event does not exist.
        """
        ...

    def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Retrieve an event by its identifier.

        Args:
            event_id: Unique event identifier.

        Returns:
            Event entity if found, None otherwise.
        """
        ...

    def list_all(self, profile_id: Optional[ProfileId] = None) -> List[Event]:
        """List events ordered by start instant ascending.

        Args:
            profile_id: When given, only events assigned to this profile.

        Returns:
            List of events (may be empty).
        """
        ...


class AuditRecordRepository(Protocol):
    """Repository port for the append-only audit log."""

    def append(self, record: AuditRecord) -> None:
        """Append an immutable audit record.

        Args:
            record: Audit record to persist.

        Raises:
            StorageUnavailableError: If the store cannot be written.
        """
        ...

    def list_by_event(self, event_id: EventId) -> List[AuditRecord]:
        """Retrieve audit records for an event, newest first.

        Ties on ``created_at`` are broken by insertion order, later first.

        Args:
            event_id: Event identifier.

        Returns:
            List of audit records (may be empty).
        """
        ...


class ProfileRepository(Protocol):
    """Repository port for Profile persistence."""

    def add(self, profile: Profile) -> None:
        """Persist a new profile.

        Raises:
            DuplicateProfileNameError: If the name is taken.
        """
        ...

    def find_by_name(self, name: str) -> Optional[Profile]:
        """Retrieve a profile by its unique name."""
        ...

    def find_by_ids(self, profile_ids: Iterable[ProfileId]) -> List[Profile]:
        """Resolve profile ids to profiles, skipping unknown ids.

        Returns:
            Profiles in the order their ids were given.
        """
        ...

    def list_all(self) -> List[Profile]:
        """List all profiles, newest first."""
        ...


class UnitOfWork(Protocol):
    """Transactional scope over the calendar repositories.

    Changes become visible to other readers only when the scope exits
    cleanly; an exception rolls back every change made in the scope.
    """

    events: EventRepository
    audit_records: AuditRecordRepository
    profiles: ProfileRepository


class CalendarStore(Protocol):
    """Storage handle injected into use cases.

    Lifecycle (connect/disconnect) is owned by the process entry point.
    """

    def connect(self) -> None:
        """Open connections and prepare the schema."""
        ...

    def disconnect(self) -> None:
        """Release connections."""
        ...

    def unit_of_work(self) -> ContextManager[UnitOfWork]:
        """Open a transactional scope.

        Raises:
            StorageUnavailableError: If the store is not reachable.
        """
        ...

    def lock_event(self, event_id: EventId) -> ContextManager[None]:
        """Serialize mutations of a single event."""
        ...

