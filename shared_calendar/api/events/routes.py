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

"""Event endpoints."""

from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from shared_calendar.core.events.exceptions import CalendarDomainError
from shared_calendar.orchestrator.events.commands import (
    CreateEventCommand,
    UpdateEventCommand,
)

from ..dependencies import CalendarServices, get_correlation_id, get_services
from ..errors import to_http_exception
from .schemas import AuditRecordModel, EventRequest, EventResponseModel

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=List[EventResponseModel])
def list_events(
    profile_id: Optional[str] = Query(default=None),
    services: CalendarServices = Depends(get_services),
    correlation_id: Optional[str] = Depends(get_correlation_id),
):
    """List events by start time, optionally only those assigned to a profile."""
    try:
        events = services.list_events.execute(profile_id, correlation_id)
    except CalendarDomainError as exc:
        raise to_http_exception(exc) from exc
    return [asdict(event) for event in events]


@router.post("", response_model=EventResponseModel, status_code=status.HTTP_201_CREATED)
def create_event(
    body: EventRequest,
    services: CalendarServices = Depends(get_services),
    correlation_id: Optional[str] = Depends(get_correlation_id),
):
    """Create an event. No change log entry is written for creation."""
    command = CreateEventCommand(event=body.to_input(), correlation_id=correlation_id)
    try:
        response = services.create_event.execute(command)
    except CalendarDomainError as exc:
        raise to_http_exception(exc) from exc
    return asdict(response)


@router.get("/{event_id}", response_model=EventResponseModel)
def get_event(
    event_id: str,
    services: CalendarServices = Depends(get_services),
    correlation_id: Optional[str] = Depends(get_correlation_id),
):
    try:
        response = services.get_event.execute(event_id, correlation_id)
    except CalendarDomainError as exc:
        raise to_http_exception(exc) from exc
    return asdict(response)


@router.put("/{event_id}", response_model=EventResponseModel)
def update_event(
    event_id: str,
    body: EventRequest,
    services: CalendarServices = Depends(get_services),
    correlation_id: Optional[str] = Depends(get_correlation_id),
):
    """Replace an event's fields and log what changed."""
    command = UpdateEventCommand(
        event_id=event_id,
        event=body.to_input(),
        correlation_id=correlation_id,
    )
    try:
        response = services.update_event.execute(command)
    except CalendarDomainError as exc:
        raise to_http_exception(exc) from exc
    return asdict(response)


@router.get("/{event_id}/logs", response_model=List[AuditRecordModel])
def get_event_logs(
    event_id: str,
    services: CalendarServices = Depends(get_services),
    correlation_id: Optional[str] = Depends(get_correlation_id),
):
    """Return an event's change log, newest first."""
    try:
        records = services.get_event_logs.execute(event_id, correlation_id)
    except CalendarDomainError as exc:
        raise to_http_exception(exc) from exc
    return [asdict(record) for record in records]
