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

"""Profile directory use cases."""

import logging
from typing import List

from shared_calendar.core.events.entities import Profile
from shared_calendar.core.events.exceptions import (
    CalendarDomainError,
    DuplicateProfileNameError,
    InvalidInputError,
)
from shared_calendar.core.events.repositories import CalendarStore, IdGenerator
from shared_calendar.core.events.temporal import resolve_zone
from shared_calendar.core.events.value_objects import ProfileId, ProfileName

from ..commands import CreateProfileCommand
from ..dtos import ProfileResponse

logger = logging.getLogger(__name__)


class CreateProfileUseCase:
    """Use case registering a profile under a unique name."""

    def __init__(self, store: CalendarStore, id_generator: IdGenerator) -> None:
        self._store = store
        self._id_generator = id_generator

    def execute(self, command: CreateProfileCommand) -> ProfileResponse:
        """Create a profile.

        Args:
            command: CreateProfile command.

        Returns:
            ProfileResponse DTO for the new profile.

        Raises:
            InvalidInputError: If the name is empty or too long.
            InvalidTimezoneError: If the default timezone is unknown.
            DuplicateProfileNameError: If the name is already registered.
        """
        try:
            name = ProfileName(command.name or "")
        except ValueError as exc:
            raise InvalidInputError("name", str(exc), command.correlation_id) from exc
        try:
            resolve_zone(command.timezone)
        except CalendarDomainError as exc:
            exc.correlation_id = exc.correlation_id or command.correlation_id
            raise

        profile = Profile(
            profile_id=ProfileId(self._id_generator.generate()),
            name=name,
            timezone=command.timezone,
        )
        with self._store.unit_of_work() as uow:
            if uow.profiles.find_by_name(str(name)) is not None:
                logger.warning("Attempted to register existing profile name")
                raise DuplicateProfileNameError(str(name), command.correlation_id)
            uow.profiles.add(profile)

        logger.info("Profile created: %s", profile.profile_id)
        return ProfileResponse.from_entity(profile)


class ListProfilesUseCase:
    """Use case listing profiles, newest first."""

    def __init__(self, store: CalendarStore) -> None:
        self._store = store

    def execute(self) -> List[ProfileResponse]:
        with self._store.unit_of_work() as uow:
            profiles = uow.profiles.list_all()
        return [ProfileResponse.from_entity(profile) for profile in profiles]
