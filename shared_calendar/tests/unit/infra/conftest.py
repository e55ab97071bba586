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

"""Fixtures for storage adapter tests."""

from datetime import datetime, timedelta, timezone

import pytest

from shared_calendar.core.events.entities import (
    AuditRecord,
    ChangeEntry,
    Event,
    Profile,
)
from shared_calendar.core.events.value_objects import (
    ChangeField,
    ChangeValue,
    ProfileId,
    ProfileName,
)
from shared_calendar.infra.memory_store import MemoryCalendarStore
from shared_calendar.infra.sql_store import SqlCalendarStore


@pytest.fixture(params=["memory", "sql"])
def calendar_store(request):
    """Each CalendarStore implementation, connected."""
    if request.param == "memory":
        store = MemoryCalendarStore()
    else:
        store = SqlCalendarStore("sqlite://")
    store.connect()
    yield store
    store.disconnect()


@pytest.fixture
def standup_event(sample_event_id, standup_state):
    return Event(event_id=sample_event_id, state=standup_state)


@pytest.fixture
def make_record():
    """Build an audit record renaming the event at a given time."""
    base = datetime(2024, 3, 11, 14, 0, tzinfo=timezone.utc)

    def _make(event_id, record_id, old_title, new_title, minutes=0):
        return AuditRecord(
            record_id=record_id,
            event_id=event_id,
            changes=(ChangeEntry(
                field=ChangeField.TITLE,
                old_value=ChangeValue.of_text(old_title),
                new_value=ChangeValue.of_text(new_title),
            ),),
            summary=f'Title changed from "{old_title}" to "{new_title}"',
            created_at=base + timedelta(minutes=minutes),
        )
    return _make


@pytest.fixture
def make_profile():
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(profile_id, name, days=0):
        return Profile(
            profile_id=ProfileId(profile_id),
            name=ProfileName(name),
            created_at=base + timedelta(days=days),
        )
    return _make
