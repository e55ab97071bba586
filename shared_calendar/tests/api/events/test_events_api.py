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

"""Integration tests for the /api/v1/events endpoints."""

from typing import Dict

import pytest
from fastapi import status
from fastapi.testclient import TestClient

UNKNOWN_EVENT_ID = "018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a77"


@pytest.mark.integration
class TestCreateEventEndpoint:
    """Test suite for POST /api/v1/events."""

    EVENTS_URL = "/api/v1/events"

    def test_create_returns_201(self, test_client: TestClient, standup_request: Dict):
        response = test_client.post(self.EVENTS_URL, json=standup_request)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Standup"
        assert data["start"] == "2024-03-11T13:00:00+00:00"
        assert data["end"] == "2024-03-11T13:30:00+00:00"
        assert data["start_local"] == "2024-03-11 09:00 EDT"
        assert data["version"] == 1

    def test_create_resolves_profile_names(
        self, test_client: TestClient, standup_request: Dict, create_profile
    ):
        alice = create_profile("Alice")
        standup_request["profiles"] = [alice]

        data = test_client.post(self.EVENTS_URL, json=standup_request).json()

        assert data["assigned_to"] == [{"profile_id": alice, "name": "Alice"}]

    def test_create_writes_no_log(self, test_client: TestClient, standup_request: Dict):
        event_id = test_client.post(self.EVENTS_URL, json=standup_request).json()["event_id"]

        response = test_client.get(f"{self.EVENTS_URL}/{event_id}/logs")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_reversed_range_returns_400(self, test_client: TestClient, standup_request: Dict):
        standup_request["end_time"] = "08:00"

        response = test_client.post(self.EVENTS_URL, json=standup_request)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["error"] == "invalid_range"
        assert test_client.get(self.EVENTS_URL).json() == []

    @pytest.mark.parametrize("field,value,kind", [
        ("title", "  ", "invalid_input"),
        ("timezone", "Mars/Olympus", "invalid_timezone"),
        ("start_date", "2024-02-30", "invalid_datetime"),
        ("start_time", "9am", "invalid_datetime"),
    ])
    def test_invalid_fields_return_400(
        self, test_client: TestClient, standup_request: Dict, field, value, kind
    ):
        standup_request[field] = value

        response = test_client.post(self.EVENTS_URL, json=standup_request)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["error"] == kind

    def test_correlation_id_echoed_in_errors(self, test_client: TestClient, standup_request: Dict):
        standup_request["timezone"] = "Nowhere/Special"

        response = test_client.post(
            self.EVENTS_URL,
            json=standup_request,
            headers={"X-Correlation-ID": "req-42"},
        )

        assert response.json()["detail"]["correlation_id"] == "req-42"

    def test_missing_field_rejected_by_schema(self, test_client: TestClient, standup_request: Dict):
        del standup_request["title"]
        response = test_client.post(self.EVENTS_URL, json=standup_request)
        assert response.status_code == 422


@pytest.mark.integration
class TestUpdateEventEndpoint:
    """Test suite for PUT /api/v1/events/{event_id}."""

    EVENTS_URL = "/api/v1/events"

    @pytest.fixture
    def event_id(self, test_client: TestClient, standup_request: Dict) -> str:
        return test_client.post(self.EVENTS_URL, json=standup_request).json()["event_id"]

    def test_reschedule_is_logged(self, test_client: TestClient, standup_request: Dict, event_id):
        standup_request.update(start_time="10:00", end_time="10:30")

        response = test_client.put(f"{self.EVENTS_URL}/{event_id}", json=standup_request)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["version"] == 2
        logs = test_client.get(f"{self.EVENTS_URL}/{event_id}/logs").json()
        assert len(logs) == 1
        assert logs[0]["message"] == "Start time updated, End time updated"
        assert [change["field"] for change in logs[0]["changes"]] == ["start", "end"]

    def test_same_instant_other_zone_not_logged(
        self, test_client: TestClient, standup_request: Dict, event_id
    ):
        standup_request.update(timezone="UTC", start_time="13:00", end_time="13:30")

        response = test_client.put(f"{self.EVENTS_URL}/{event_id}", json=standup_request)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["start_local"] == "2024-03-11 13:00 UTC"
        assert test_client.get(f"{self.EVENTS_URL}/{event_id}/logs").json() == []

    def test_logs_newest_first(self, test_client: TestClient, standup_request: Dict, event_id):
        standup_request["title"] = "Daily Standup"
        test_client.put(f"{self.EVENTS_URL}/{event_id}", json=standup_request)
        standup_request["description"] = "Bring blockers"
        test_client.put(f"{self.EVENTS_URL}/{event_id}", json=standup_request)

        logs = test_client.get(f"{self.EVENTS_URL}/{event_id}/logs").json()

        assert [log["message"] for log in logs] == [
            "Description updated",
            'Title changed from "Standup" to "Daily Standup"',
        ]

    def test_invalid_update_leaves_event_untouched(
        self, test_client: TestClient, standup_request: Dict, event_id
    ):
        standup_request.update(start_time="10:00", end_time="10:00")

        response = test_client.put(f"{self.EVENTS_URL}/{event_id}", json=standup_request)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["error"] == "invalid_range"
        event = test_client.get(f"{self.EVENTS_URL}/{event_id}").json()
        assert event["version"] == 1

    def test_unknown_event_returns_404(self, test_client: TestClient, standup_request: Dict):
        response = test_client.put(f"{self.EVENTS_URL}/{UNKNOWN_EVENT_ID}", json=standup_request)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["error"] == "not_found"


@pytest.mark.integration
class TestReadEventEndpoints:
    """Test suite for GET /api/v1/events and its sub-resources."""

    EVENTS_URL = "/api/v1/events"

    def test_get_unknown_event_returns_404(self, test_client: TestClient):
        response = test_client.get(f"{self.EVENTS_URL}/{UNKNOWN_EVENT_ID}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_logs_of_unknown_event_return_404(self, test_client: TestClient):
        response = test_client.get(f"{self.EVENTS_URL}/not-an-id/logs")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_filtered_by_profile(
        self, test_client: TestClient, standup_request: Dict, create_profile
    ):
        alice = create_profile("Alice")
        standup_request["profiles"] = [alice]
        test_client.post(self.EVENTS_URL, json=standup_request)
        standup_request.update(title="Focus time", profiles=[])
        test_client.post(self.EVENTS_URL, json=standup_request)

        everything = test_client.get(self.EVENTS_URL).json()
        for_alice = test_client.get(self.EVENTS_URL, params={"profile_id": alice}).json()

        assert len(everything) == 2
        assert [event["title"] for event in for_alice] == ["Standup"]

    def test_list_with_malformed_profile_returns_400(self, test_client: TestClient):
        response = test_client.get(self.EVENTS_URL, params={"profile_id": "alice"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["error"] == "invalid_input"
