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

"""Profile directory endpoints."""

from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from shared_calendar.core.events.exceptions import CalendarDomainError
from shared_calendar.orchestrator.events.commands import CreateProfileCommand

from ..dependencies import CalendarServices, get_correlation_id, get_services
from ..errors import to_http_exception
from .schemas import ProfileRequest, ProfileResponseModel

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("", response_model=List[ProfileResponseModel])
def list_profiles(services: CalendarServices = Depends(get_services)):
    """List profiles, newest first."""
    try:
        profiles = services.list_profiles.execute()
    except CalendarDomainError as exc:
        raise to_http_exception(exc) from exc
    return [asdict(profile) for profile in profiles]


@router.post("", response_model=ProfileResponseModel, status_code=status.HTTP_201_CREATED)
def create_profile(
    body: ProfileRequest,
    services: CalendarServices = Depends(get_services),
    correlation_id: Optional[str] = Depends(get_correlation_id),
):
    """Register a profile under a unique name."""
    command = CreateProfileCommand(
        name=body.name,
        timezone=body.timezone,
        correlation_id=correlation_id,
    )
    try:
        response = services.create_profile.execute(command)
    except CalendarDomainError as exc:
        raise to_http_exception(exc) from exc
    return asdict(response)
