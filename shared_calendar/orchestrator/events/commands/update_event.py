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

"""UpdateEvent command DTO."""

from dataclasses import dataclass
from typing import Optional

from .create_event import EventInput


@dataclass(frozen=True)
class UpdateEventCommand:
    """Command to replace the field values of an existing event.

    Attributes:
        event_id: Identifier of the event to update.
        event: Proposed field values (full replacement).
        correlation_id: Optional request correlation identifier.
    """

    event_id: str
    event: EventInput
    correlation_id: Optional[str] = None
