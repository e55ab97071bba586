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

"""Shared pytest fixtures for shared calendar tests."""

from datetime import datetime, timezone

import pytest

from shared_calendar.core.events.entities import EventState
from shared_calendar.core.events.value_objects import EventId, ProfileId

ALICE_ID = "018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a11"
BOB_ID = "018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a12"
CAROL_ID = "018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a13"


@pytest.fixture
def sample_event_id():
    """Sample event ID for testing."""
    return EventId("018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a99")


@pytest.fixture
def alice_id():
    return ProfileId(ALICE_ID)


@pytest.fixture
def bob_id():
    return ProfileId(BOB_ID)


@pytest.fixture
def carol_id():
    return ProfileId(CAROL_ID)


@pytest.fixture
def standup_state(alice_id, bob_id):
    """Standup on 2024-03-11, 09:00-09:30 America/New_York (13:00-13:30 UTC)."""
    return EventState(
        title="Standup",
        description="Daily sync",
        start=datetime(2024, 3, 11, 13, 0, tzinfo=timezone.utc),
        end=datetime(2024, 3, 11, 13, 30, tzinfo=timezone.utc),
        timezone="America/New_York",
        assigned_to=(alice_id, bob_id),
    )
