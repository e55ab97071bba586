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

"""In-memory calendar store.

Writes made inside a unit of work are staged and applied under a short
commit lock when the scope exits cleanly, so readers never observe an
event update without its audit record. Intended for tests, demos and
single-process deployments.
"""

import itertools
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from shared_calendar.core.events.entities import AuditRecord, Event, Profile
from shared_calendar.core.events.exceptions import (
    DuplicateProfileNameError,
    EventNotFoundError,
    OptimisticLockError,
    StorageUnavailableError,
)
from shared_calendar.core.events.value_objects import EventId, ProfileId

from .locks import EventLockRegistry

logger = logging.getLogger(__name__)


class MemoryCalendarStore:
    """CalendarStore implementation backed by process memory."""

    def __init__(self) -> None:
        self._connected = False
        self._commit_lock = threading.Lock()
        self._sequence = itertools.count(1)
        self._events: Dict[str, Event] = {}
        self._audit: List[Tuple[int, AuditRecord]] = []
        self._profiles: Dict[str, Tuple[int, Profile]] = {}
        self._event_locks = EventLockRegistry()

    def connect(self) -> None:
        self._connected = True
        logger.info("In-memory calendar store connected")

    def disconnect(self) -> None:
        self._connected = False
        logger.info("In-memory calendar store disconnected")

    @property
    def connected(self) -> bool:
        return self._connected

    @contextmanager
    def unit_of_work(self) -> Iterator["MemoryUnitOfWork"]:
        """Open a staged unit of work, applied on clean exit."""
        if not self._connected:
            raise StorageUnavailableError("unit_of_work")
        uow = MemoryUnitOfWork(self)
        yield uow
        self._commit(uow)

    def lock_event(self, event_id: EventId):
        return self._event_locks.hold(event_id)

    def _commit(self, uow: "MemoryUnitOfWork") -> None:
        """Validate and apply every staged write atomically."""
        with self._commit_lock:
            for key, (event, expected_version) in uow.saved_events.items():
                current = self._events.get(key)
                if current is None:
                    raise EventNotFoundError(key)
                if current.version != expected_version:
                    raise OptimisticLockError(
                        entity_type="Event",
                        entity_id=key,
                        expected_version=expected_version,
                        actual_version=current.version,
                    )
            staged_names = set()
            for profile in uow.new_profiles:
                name = str(profile.name)
                if name in staged_names or self._find_profile_by_name(name) is not None:
                    raise DuplicateProfileNameError(name)
                staged_names.add(name)

            self._events.update(uow.new_events)
            for key, (event, _) in uow.saved_events.items():
                self._events[key] = event
            for record in uow.audit_records_staged:
                self._audit.append((next(self._sequence), record))
            for profile in uow.new_profiles:
                self._profiles[str(profile.profile_id)] = (next(self._sequence), profile)

    def _find_profile_by_name(self, name: str) -> Optional[Profile]:
        for _, profile in self._profiles.values():
            if str(profile.name) == name:
                return profile
        return None

    def read_event(self, key: str) -> Optional[Event]:
        with self._commit_lock:
            return self._events.get(key)

    def read_events(self) -> List[Event]:
        with self._commit_lock:
            return list(self._events.values())

    def read_audit(self) -> List[Tuple[int, AuditRecord]]:
        with self._commit_lock:
            return list(self._audit)

    def read_profiles(self) -> List[Tuple[int, Profile]]:
        with self._commit_lock:
            return list(self._profiles.values())


class MemoryUnitOfWork:
    """Staged writes plus repositories reading through them."""

    def __init__(self, store: MemoryCalendarStore) -> None:
        self.store = store
        self.new_events: Dict[str, Event] = {}
        self.saved_events: Dict[str, Tuple[Event, int]] = {}
        self.audit_records_staged: List[AuditRecord] = []
        self.new_profiles: List[Profile] = []
        self.events = MemoryEventRepository(self)
        self.audit_records = MemoryAuditRecordRepository(self)
        self.profiles = MemoryProfileRepository(self)


class MemoryEventRepository:
    """EventRepository over a MemoryUnitOfWork."""

    def __init__(self, uow: MemoryUnitOfWork) -> None:
        self._uow = uow

    def add(self, event: Event) -> None:
        self._uow.new_events[str(event.event_id)] = event

    def save(self, event: Event, expected_version: int) -> None:
        key = str(event.event_id)
        current = self._uow.store.read_event(key)
        if current is None:
            raise EventNotFoundError(key)
        if current.version != expected_version:
            raise OptimisticLockError(
                entity_type="Event",
                entity_id=key,
                expected_version=expected_version,
                actual_version=current.version,
            )
        self._uow.saved_events[key] = (event, expected_version)

    def find_by_id(self, event_id: EventId) -> Optional[Event]:
        key = str(event_id)
        if key in self._uow.saved_events:
            return self._uow.saved_events[key][0]
        if key in self._uow.new_events:
            return self._uow.new_events[key]
        return self._uow.store.read_event(key)

    def list_all(self, profile_id: Optional[ProfileId] = None) -> List[Event]:
        merged = {str(event.event_id): event for event in self._uow.store.read_events()}
        merged.update(self._uow.new_events)
        merged.update({key: event for key, (event, _) in self._uow.saved_events.items()})
        events = list(merged.values())
        if profile_id is not None:
            events = [event for event in events if profile_id in event.assigned_to]
        return sorted(events, key=lambda event: (event.start, event.created_at))


class MemoryAuditRecordRepository:
    """Append-only AuditRecordRepository over a MemoryUnitOfWork."""

    def __init__(self, uow: MemoryUnitOfWork) -> None:
        self._uow = uow

    def append(self, record: AuditRecord) -> None:
        self._uow.audit_records_staged.append(record)

    def list_by_event(self, event_id: EventId) -> List[AuditRecord]:
        entries = self._uow.store.read_audit()
        offset = max((seq for seq, _ in entries), default=0) + 1
        # staged records sort after committed ones
        entries.extend(
            (offset + index, record)
            for index, record in enumerate(self._uow.audit_records_staged)
        )
        matching = [entry for entry in entries if entry[1].event_id == event_id]
        matching.sort(key=lambda entry: (entry[1].created_at, entry[0]), reverse=True)
        return [record for _, record in matching]


class MemoryProfileRepository:
    """ProfileRepository over a MemoryUnitOfWork."""

    def __init__(self, uow: MemoryUnitOfWork) -> None:
        self._uow = uow

    def _all(self) -> List[Tuple[int, Profile]]:
        entries = self._uow.store.read_profiles()
        offset = max((seq for seq, _ in entries), default=0) + 1
        entries.extend(
            (offset + index, profile)
            for index, profile in enumerate(self._uow.new_profiles)
        )
        return entries

    def add(self, profile: Profile) -> None:
        if self.find_by_name(str(profile.name)) is not None:
            raise DuplicateProfileNameError(str(profile.name))
        self._uow.new_profiles.append(profile)

    def find_by_name(self, name: str) -> Optional[Profile]:
        for _, profile in self._all():
            if str(profile.name) == name:
                return profile
        return None

    def find_by_ids(self, profile_ids: Iterable[ProfileId]) -> List[Profile]:
        by_id = {str(profile.profile_id): profile for _, profile in self._all()}
        found = []
        for profile_id in profile_ids:
            profile = by_id.get(str(profile_id))
            if profile is not None:
                found.append(profile)
        return found

    def list_all(self) -> List[Profile]:
        entries = sorted(
            self._all(),
            key=lambda entry: (entry[1].created_at, entry[0]),
            reverse=True,
        )
        return [profile for _, profile in entries]
