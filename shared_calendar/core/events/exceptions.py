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

"""Domain exceptions for the calendar Events domain."""

from enum import Enum
from typing import ClassVar, Optional


class ErrorKind(str, Enum):
    """Stable error kinds exposed to callers."""

    INVALID_INPUT = "invalid_input"
    INVALID_RANGE = "invalid_range"
    INVALID_TIMEZONE = "invalid_timezone"
    INVALID_DATETIME = "invalid_datetime"
    NOT_FOUND = "not_found"
    DUPLICATE_NAME = "duplicate_name"
    CONCURRENT_MODIFICATION = "concurrent_modification"
    STORAGE_UNAVAILABLE = "storage_unavailable"


class CalendarDomainError(Exception):
    """Base exception for all calendar domain errors."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class InvalidInputError(CalendarDomainError):
    """A required field is missing, empty or malformed."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(
        self,
        field: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize invalid input error.

        Args:
            field: Name of the offending input field.
            reason: Why the value was rejected.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Invalid {field}: {reason}",
            correlation_id=correlation_id
        )
        self.field = field
        self.reason = reason


class InvalidRangeError(CalendarDomainError):
    """Event end is not strictly after its start."""

    kind = ErrorKind.INVALID_RANGE

    def __init__(
        self,
        start: str,
        end: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize invalid range error.

        Args:
            start: Start instant (ISO 8601).
            end: End instant (ISO 8601).
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"End time must be after start time: start={start}, end={end}",
            correlation_id=correlation_id
        )
        self.start = start
        self.end = end


class InvalidTimezoneError(CalendarDomainError):
    """Timezone name is not a recognized IANA identifier."""

    kind = ErrorKind.INVALID_TIMEZONE

    def __init__(self, timezone: str, correlation_id: Optional[str] = None) -> None:
        """Initialize invalid timezone error.

        Args:
            timezone: The rejected zone name.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Unknown IANA timezone: {timezone!r}",
            correlation_id=correlation_id
        )
        self.timezone = timezone


class InvalidDateTimeError(CalendarDomainError):
    """Date or time could not be parsed as a valid calendar moment."""

    kind = ErrorKind.INVALID_DATETIME

    def __init__(self, value: str, correlation_id: Optional[str] = None) -> None:
        """Initialize invalid date/time error.

        Args:
            value: The rejected date/time text.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Invalid date/time: {value!r}",
            correlation_id=correlation_id
        )
        self.value = value


class EventNotFoundError(CalendarDomainError):
    """Event does not exist in the calendar."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, event_id: str, correlation_id: Optional[str] = None) -> None:
        """Initialize event not found error.

        Args:
            event_id: The event ID that was not found.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Event not found: {event_id}",
            correlation_id=correlation_id
        )
        self.event_id = event_id


class DuplicateProfileNameError(CalendarDomainError):
    """A profile with the given name already exists."""

    kind = ErrorKind.DUPLICATE_NAME

    def __init__(self, name: str, correlation_id: Optional[str] = None) -> None:
        """Initialize duplicate profile name error.

        Args:
            name: The profile name that is already taken.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Profile already exists: {name}",
            correlation_id=correlation_id
        )
        self.name = name


class OptimisticLockError(CalendarDomainError):
    """Version conflict detected during update."""

    kind = ErrorKind.CONCURRENT_MODIFICATION

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        expected_version: int,
        actual_version: int,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize optimistic lock error.

        Args:
            entity_type: Type of entity (Event).
            entity_id: Identifier of the entity.
            expected_version: Version the writer based its change on.
            actual_version: Current version in the store.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Version conflict for {entity_type} {entity_id}: "
            f"expected {expected_version}, found {actual_version}",
            correlation_id=correlation_id
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version


class StorageUnavailableError(CalendarDomainError):
    """The persistence collaborator failed or is not connected."""

    kind = ErrorKind.STORAGE_UNAVAILABLE

    def __init__(self, operation: str, correlation_id: Optional[str] = None) -> None:
        """Initialize storage unavailable error.

        Args:
            operation: The storage operation that failed.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Storage unavailable during {operation}",
            correlation_id=correlation_id
        )
        self.operation = operation
