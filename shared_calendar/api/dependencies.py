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

"""Dependency wiring for API routes."""

from dataclasses import dataclass
from typing import Optional

from fastapi import Header, Request

from shared_calendar.core.events.repositories import CalendarStore, IdGenerator
from shared_calendar.orchestrator.events.use_cases import (
    CreateEventUseCase,
    CreateProfileUseCase,
    GetEventLogsUseCase,
    GetEventUseCase,
    ListEventsUseCase,
    ListProfilesUseCase,
    UpdateEventUseCase,
)


@dataclass(frozen=True)
class CalendarServices:
    """Use cases bound to one storage handle."""

    create_event: CreateEventUseCase
    update_event: UpdateEventUseCase
    get_event: GetEventUseCase
    list_events: ListEventsUseCase
    get_event_logs: GetEventLogsUseCase
    create_profile: CreateProfileUseCase
    list_profiles: ListProfilesUseCase

    @classmethod
    def build(
        cls,
        store: CalendarStore,
        id_generator: IdGenerator,
        update_retry_limit: int,
    ) -> "CalendarServices":
        return cls(
            create_event=CreateEventUseCase(store, id_generator),
            update_event=UpdateEventUseCase(
                store, id_generator, retry_limit=update_retry_limit
            ),
            get_event=GetEventUseCase(store),
            list_events=ListEventsUseCase(store),
            get_event_logs=GetEventLogsUseCase(store),
            create_profile=CreateProfileUseCase(store, id_generator),
            list_profiles=ListProfilesUseCase(store),
        )


def get_services(request: Request) -> CalendarServices:
    """Return the use cases wired at application startup."""
    return request.app.state.services


def get_correlation_id(
    x_correlation_id: Optional[str] = Header(default=None),
) -> Optional[str]:
    """Return the caller-supplied X-Correlation-ID header, if any."""
    return x_correlation_id
