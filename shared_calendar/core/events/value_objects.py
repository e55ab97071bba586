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

"""Value objects for the calendar Events domain.

All value objects are immutable and defined by their values, not identity.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class EventId:
    """UUID v7 identifier for a calendar event.

    Attributes:
        value: String representation of UUID v7.

    Raises:
        ValueError: If value does not match UUID v7 pattern or exceeds length.
    """

    value: str

    UUID_V7_PATTERN: ClassVar[str] = (
        r'^[0-9a-f]{8}-[0-9a-f]{4}-7[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$'
    )
    MAX_LENGTH: ClassVar[int] = 36  # UUID v7 standard length

    def __post_init__(self) -> None:
        """Validate UUID v7 format and length."""
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"EventId length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if not re.match(self.UUID_V7_PATTERN, self.value.lower()):
            raise ValueError(f"Invalid UUID v7 format: {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class ProfileId:
    """UUID v7 identifier for a profile that can be assigned to events.

    Attributes:
        value: String representation of UUID v7.

    Raises:
        ValueError: If value does not match UUID v7 pattern or exceeds length.
    """

    value: str

    UUID_V7_PATTERN: ClassVar[str] = (
        r'^[0-9a-f]{8}-[0-9a-f]{4}-7[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$'
    )
    MAX_LENGTH: ClassVar[int] = 36

    def __post_init__(self) -> None:
        """Validate UUID v7 format and length."""
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"ProfileId length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if not re.match(self.UUID_V7_PATTERN, self.value.lower()):
            raise ValueError(f"Invalid UUID v7 format: {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class ProfileName:
    """Unique display name of a profile.

    Attributes:
        value: Profile name (1-100 characters, not blank).

    Raises:
        ValueError: If value is blank or exceeds length.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 100

    def __post_init__(self) -> None:
        """Validate name is not blank and within length limit."""
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"ProfileName length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if not self.value or not self.value.strip():
            raise ValueError("Profile name cannot be empty")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class ChangeField(str, Enum):
    """Tracked event fields, in the order the diff checks them.

    DESCRIPTION is the open-ended "other" bucket; it is checked last so
    the core fields always lead the audit summary.
    """

    TITLE = "title"
    START = "start"
    END = "end"
    ASSIGNED_TO = "assigned_to"
    DESCRIPTION = "description"


class ValueKind(str, Enum):
    """Tag of a ChangeValue variant."""

    TEXT = "text"
    INSTANT = "instant"
    ID_SET = "id_set"


@dataclass(frozen=True)
class ChangeValue:
    """Tagged variant over the value types a tracked field can hold.

    Exactly one payload attribute is populated, selected by ``kind``.
    Build instances through ``of_text``, ``of_instant`` or ``of_ids``.

    Attributes:
        kind: Which payload is populated.
        text: Payload for TEXT values.
        instant: Payload for INSTANT values (timezone-aware, UTC).
        ids: Payload for ID_SET values, sorted ascending.
    """

    kind: ValueKind
    text: Optional[str] = None
    instant: Optional[datetime] = None
    ids: Tuple[str, ...] = ()

    @classmethod
    def of_text(cls, text: str) -> "ChangeValue":
        """Wrap a text value."""
        return cls(kind=ValueKind.TEXT, text=text)

    @classmethod
    def of_instant(cls, instant: datetime) -> "ChangeValue":
        """Wrap an absolute instant, normalized to UTC."""
        if instant.tzinfo is None:
            raise ValueError("Instant values must be timezone-aware")
        return cls(kind=ValueKind.INSTANT, instant=instant.astimezone(timezone.utc))

    @classmethod
    def of_ids(cls, ids: Iterable[Any]) -> "ChangeValue":
        """Wrap a set of identifiers as a sorted tuple of strings."""
        return cls(kind=ValueKind.ID_SET, ids=tuple(sorted({str(i) for i in ids})))

    def to_primitive(self) -> Any:
        """Return a JSON-compatible rendering of the payload."""
        if self.kind == ValueKind.TEXT:
            return self.text
        if self.kind == ValueKind.INSTANT:
            return self.instant.isoformat()
        return list(self.ids)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the kind tag so the variant can be rebuilt."""
        return {"kind": self.kind.value, "value": self.to_primitive()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChangeValue":
        """Rebuild a ChangeValue serialized by ``to_dict``."""
        kind = ValueKind(data["kind"])
        value = data["value"]
        if kind == ValueKind.TEXT:
            return cls.of_text(value)
        if kind == ValueKind.INSTANT:
            return cls.of_instant(datetime.fromisoformat(value))
        return cls.of_ids(value)


class Ordering(str, Enum):
    """Result of comparing two instants."""

    BEFORE = "before"
    EQUAL = "equal"
    AFTER = "after"
