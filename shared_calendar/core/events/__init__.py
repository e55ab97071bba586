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

"""Events domain module for the shared calendar."""

from .entities import AuditRecord, ChangeEntry, Event, EventState, Profile
from .exceptions import (
    CalendarDomainError,
    DuplicateProfileNameError,
    ErrorKind,
    EventNotFoundError,
    InvalidDateTimeError,
    InvalidInputError,
    InvalidRangeError,
    InvalidTimezoneError,
    OptimisticLockError,
    StorageUnavailableError,
)
from .repositories import (
    AuditRecordRepository,
    CalendarStore,
    EventRepository,
    IdGenerator,
    ProfileRepository,
    UnitOfWork,
)
from .services import DiffEngine
from .temporal import compare_instants, format_for_zone, to_instant
from .value_objects import (
    ChangeField,
    ChangeValue,
    EventId,
    Ordering,
    ProfileId,
    ProfileName,
    ValueKind,
)

__all__ = [
    "AuditRecord",
    "ChangeEntry",
    "Event",
    "EventState",
    "Profile",
    "CalendarDomainError",
    "DuplicateProfileNameError",
    "ErrorKind",
    "EventNotFoundError",
    "InvalidDateTimeError",
    "InvalidInputError",
    "InvalidRangeError",
    "InvalidTimezoneError",
    "OptimisticLockError",
    "StorageUnavailableError",
    "AuditRecordRepository",
    "CalendarStore",
    "EventRepository",
    "IdGenerator",
    "ProfileRepository",
    "UnitOfWork",
    "DiffEngine",
    "compare_instants",
    "format_for_zone",
    "to_instant",
    "ChangeField",
    "ChangeValue",
    "EventId",
    "Ordering",
    "ProfileId",
    "ProfileName",
    "ValueKind",
]
