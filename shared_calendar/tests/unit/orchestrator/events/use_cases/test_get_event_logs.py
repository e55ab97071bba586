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

"""Unit tests for GetEventLogsUseCase."""

import pytest

from shared_calendar.core.events.exceptions import EventNotFoundError
from shared_calendar.orchestrator.events.commands import (
    CreateEventCommand,
    UpdateEventCommand,
)
from shared_calendar.orchestrator.events.use_cases import (
    CreateEventUseCase,
    GetEventLogsUseCase,
    UpdateEventUseCase,
)


class TestGetEventLogsUseCase:
    """Tests for GetEventLogsUseCase."""

    @pytest.fixture
    def event_id(self, store, id_generator, standup_input):
        response = CreateEventUseCase(store, id_generator).execute(
            CreateEventCommand(event=standup_input)
        )
        return response.event_id

    @pytest.fixture
    def update(self, store, id_generator):
        use_case = UpdateEventUseCase(store, id_generator)

        def _update(event_id, event_input):
            return use_case.execute(UpdateEventCommand(event_id=event_id, event=event_input))
        return _update

    def test_new_event_has_empty_log(self, store, event_id):
        assert GetEventLogsUseCase(store).execute(event_id) == []

    def test_newest_first(self, store, event_id, update, make_input):
        update(event_id, make_input(title="Daily Standup"))
        update(event_id, make_input(title="Daily Standup", description="Bring blockers"))

        logs = GetEventLogsUseCase(store).execute(event_id)

        assert [log.message for log in logs] == [
            "Description updated",
            'Title changed from "Standup" to "Daily Standup"',
        ]
        assert all(log.event_id == event_id for log in logs)

    def test_structured_changes_are_tagged(self, store, event_id, update, make_input):
        update(event_id, make_input(start_time="10:00", end_time="10:30"))

        (log,) = GetEventLogsUseCase(store).execute(event_id)

        assert log.message == "Start time updated, End time updated"
        assert log.changes[0] == {
            "field": "start",
            "old_value": {"kind": "instant", "value": "2024-03-11T13:00:00+00:00"},
            "new_value": {"kind": "instant", "value": "2024-03-11T14:00:00+00:00"},
        }
        assert log.changes[1]["field"] == "end"

    def test_logs_scoped_to_event(self, store, id_generator, event_id, update, make_input):
        other = CreateEventUseCase(store, id_generator).execute(
            CreateEventCommand(event=make_input(title="Retro"))
        )
        update(other.event_id, make_input(title="Sprint Retro"))

        assert GetEventLogsUseCase(store).execute(event_id) == []
        assert len(GetEventLogsUseCase(store).execute(other.event_id)) == 1

    def test_unknown_event(self, store):
        with pytest.raises(EventNotFoundError):
            GetEventLogsUseCase(store).execute("018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a77")

    def test_malformed_event_id(self, store):
        with pytest.raises(EventNotFoundError):
            GetEventLogsUseCase(store).execute("not-an-id")
