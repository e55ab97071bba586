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

"""Shared pytest fixtures for shared calendar API tests."""

from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient

from shared_calendar.config import Settings
from shared_calendar.infra.memory_store import MemoryCalendarStore
from shared_calendar.main import create_app


@pytest.fixture
def test_client() -> Generator:
    """Create a TestClient over a fresh in-memory store.

    Yields:
        TestClient with the application lifespan running.
    """
    app = create_app(settings=Settings(), store=MemoryCalendarStore())
    with TestClient(app) as client:
        yield client


@pytest.fixture
def standup_request() -> Dict:
    """Standup at 09:00-09:30 New York time on 2024-03-11."""
    return {
        "title": "Standup",
        "description": "Daily sync",
        "timezone": "America/New_York",
        "start_date": "2024-03-11",
        "start_time": "09:00",
        "end_date": "2024-03-11",
        "end_time": "09:30",
        "profiles": [],
    }


@pytest.fixture
def create_profile(test_client):
    """Register a profile through the API and return its id."""
    def _create(name: str, timezone: str = "UTC") -> str:
        response = test_client.post(
            "/api/v1/profiles",
            json={"name": name, "timezone": timezone},
        )
        assert response.status_code == 201
        return response.json()["profile_id"]
    return _create
