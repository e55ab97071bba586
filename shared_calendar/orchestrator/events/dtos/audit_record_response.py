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

"""Audit record response DTO."""

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class AuditRecordResponse:
    """Response DTO for one entry of an event's change log.

    Attributes:
        record_id: Unique record identifier.
        event_id: Event the record belongs to.
        message: Human-readable summary of the changes.
        changes: Structured changes with tagged old/new values.
        created_at: When the change was committed (ISO 8601).
    """

    record_id: str
    event_id: str
    message: str
    changes: List[Dict[str, Any]]
    created_at: str

    @staticmethod
    def from_entity(record) -> "AuditRecordResponse":
        """Create response DTO from an AuditRecord entity."""
        return AuditRecordResponse(
            record_id=record.record_id,
            event_id=str(record.event_id),
            message=record.summary,
            changes=[change.to_dict() for change in record.changes],
            created_at=record.created_at.isoformat(),
        )
