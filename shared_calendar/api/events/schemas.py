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

"""Pydantic schemas for event endpoints."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from shared_calendar.orchestrator.events.commands import EventInput


class EventRequest(BaseModel):
    """Request body for creating or replacing an event.

    Start and end are local readings in ``timezone``.
    """

    title: str = Field(..., description="Event title, must not be blank")
    description: str = Field(default="", description="Free-text description")
    timezone: str = Field(..., description="IANA timezone, e.g. America/New_York")
    start_date: str = Field(..., description="Local start date (YYYY-MM-DD)")
    start_time: str = Field(..., description="Local start time (HH:MM)")
    end_date: str = Field(..., description="Local end date (YYYY-MM-DD)")
    end_time: str = Field(..., description="Local end time (HH:MM)")
    profiles: List[str] = Field(default_factory=list, description="Assigned profile ids")

    def to_input(self) -> EventInput:
        return EventInput(
            title=self.title,
            description=self.description,
            timezone=self.timezone,
            start_date=self.start_date,
            start_time=self.start_time,
            end_date=self.end_date,
            end_time=self.end_time,
            profiles=tuple(self.profiles),
        )


class AssignedProfileModel(BaseModel):
    profile_id: str
    name: str


class EventResponseModel(BaseModel):
    """Event as returned by the API."""

    event_id: str
    title: str
    description: str
    start: str
    end: str
    start_local: str
    end_local: str
    timezone: str
    assigned_to: List[AssignedProfileModel]
    created_at: str
    updated_at: str
    version: int


class AuditRecordModel(BaseModel):
    """One entry of an event's change log."""

    record_id: str
    event_id: str
    message: str
    changes: List[Dict[str, Any]]
    created_at: str
