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

"""GetEventLogs use case implementation."""

from typing import List, Optional

from shared_calendar.core.events.exceptions import EventNotFoundError
from shared_calendar.core.events.repositories import CalendarStore

from ..dtos import AuditRecordResponse
from .event_input import parse_event_id


class GetEventLogsUseCase:
    """Use case returning an event's change log, newest first."""

    def __init__(self, store: CalendarStore) -> None:
        self._store = store

    def execute(
        self,
        event_id: str,
        correlation_id: Optional[str] = None,
    ) -> List[AuditRecordResponse]:
        """Return the audit records of an event.

        Args:
            event_id: Identifier of the event.
            correlation_id: Optional request correlation identifier.

        Returns:
            Audit record DTOs ordered newest first.

        Raises:
            EventNotFoundError: If the event does not exist.
            StorageUnavailableError: If the store cannot be read.
        """
        parsed_id = parse_event_id(event_id, correlation_id)
        with self._store.unit_of_work() as uow:
            if uow.events.find_by_id(parsed_id) is None:
                raise EventNotFoundError(event_id, correlation_id)
            records = uow.audit_records.list_by_event(parsed_id)
        return [AuditRecordResponse.from_entity(record) for record in records]
