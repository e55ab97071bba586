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

"""Shared fixtures for use case tests."""

from contextlib import contextmanager
from dataclasses import replace

import pytest

from shared_calendar.core.events.repositories import IdGenerator
from shared_calendar.infra.memory_store import MemoryCalendarStore
from shared_calendar.infra.sql_store import SqlCalendarStore
from shared_calendar.orchestrator.events.commands import CreateProfileCommand, EventInput
from shared_calendar.orchestrator.events.use_cases import CreateProfileUseCase


class FakeIdGenerator(IdGenerator):
    """Fake UUID v7 generator for testing."""
    def __init__(self):
        """Initialize the fake generator."""
        self._counter = 1

    def generate(self) -> str:
        """Generate a predictable UUID v7 string for testing."""
        value = f"018e1234-5678-7abc-9def-123456789{self._counter:03d}"
        self._counter += 1
        return value


@pytest.fixture(params=["memory", "sql"])
def store(request, tmp_path):
    """Provide each connected store implementation.

    The SQL store uses a SQLite file so that concurrent sessions get
    their own connections.
    """
    if request.param == "memory":
        calendar_store = MemoryCalendarStore()
    else:
        calendar_store = SqlCalendarStore(f"sqlite:///{tmp_path}/calendar.db")
    calendar_store.connect()
    yield calendar_store
    calendar_store.disconnect()


@pytest.fixture
def intercept_unit_of_work(store, monkeypatch):
    """Run a hook on every unit of work the store opens from now on.

    The hook receives the unit of work and may replace repository methods
    on it. It also receives the unpatched ``unit_of_work`` so it can
    commit competing writes.
    """
    original = store.unit_of_work

    def _install(hook):
        @contextmanager
        def patched():
            with original() as uow:
                hook(uow, original)
                yield uow
        monkeypatch.setattr(store, "unit_of_work", patched)
    return _install


@pytest.fixture
def stored_events(store):
    """Return every committed event."""
    def _list():
        with store.unit_of_work() as uow:
            return uow.events.list_all()
    return _list


@pytest.fixture
def stored_profiles(store):
    """Return every committed profile."""
    def _list():
        with store.unit_of_work() as uow:
            return uow.profiles.list_all()
    return _list


@pytest.fixture
def id_generator():
    """Provide fake id generator."""
    return FakeIdGenerator()


@pytest.fixture
def standup_input():
    """Standup, 2024-03-11 09:00-09:30 in New York, unassigned."""
    return EventInput(
        title="Standup",
        description="Daily sync",
        timezone="America/New_York",
        start_date="2024-03-11",
        start_time="09:00",
        end_date="2024-03-11",
        end_time="09:30",
    )


@pytest.fixture
def make_input(standup_input):
    """Build an EventInput from the standup defaults with overrides."""
    def _make(**overrides) -> EventInput:
        return replace(standup_input, **overrides)
    return _make


@pytest.fixture
def profile_factory(store, id_generator):
    """Register profiles in the store and return their response DTOs."""
    use_case = CreateProfileUseCase(store, id_generator)

    def _create(name: str, timezone: str = "UTC"):
        return use_case.execute(CreateProfileCommand(name=name, timezone=timezone))
    return _create
