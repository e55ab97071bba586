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

"""Audit trail entities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Tuple

from ..value_objects import ChangeField, ChangeValue, EventId


@dataclass(frozen=True)
class ChangeEntry:
    """One field-level difference between two states of an event.

    Attributes:
        field: Which tracked field changed.
        old_value: Value before the mutation.
        new_value: Value after the mutation.
    """

    field: ChangeField
    old_value: ChangeValue
    new_value: ChangeValue

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field.value,
            "old_value": self.old_value.to_dict(),
            "new_value": self.new_value.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChangeEntry":
        return cls(
            field=ChangeField(data["field"]),
            old_value=ChangeValue.from_dict(data["old_value"]),
            new_value=ChangeValue.from_dict(data["new_value"]),
        )


@dataclass(frozen=True)
class AuditRecord:
    """Immutable record of every change produced by one mutation.

    Attributes:
        record_id: Unique record identifier.
        event_id: Event the record belongs to.
        changes: Ordered field-level changes, never empty.
        summary: Human-readable summary of the changes.
        created_at: When the mutation was committed.
    """

    record_id: str
    event_id: EventId
    changes: Tuple[ChangeEntry, ...]
    summary: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.changes:
            raise ValueError("An audit record requires at least one change")
