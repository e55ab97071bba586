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

"""CreateEvent command DTO."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class EventInput:
    """Proposed field values for an event, as entered in the authoring zone.

    Dates are ``YYYY-MM-DD`` and times ``HH:MM`` (or ``HH:MM:SS``) local to
    ``timezone``. All validation is performed in the use case layer.

    Attributes:
        title: Event title.
        description: Free-text description.
        timezone: IANA zone the local readings were taken in.
        start_date: Local start date.
        start_time: Local start time.
        end_date: Local end date.
        end_time: Local end time.
        profiles: Assigned profile ids, in display order.
    """

    title: str
    timezone: str
    start_date: str
    start_time: str
    end_date: str
    end_time: str
    description: str = ""
    profiles: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CreateEventCommand:
    """Command to create a new event.

    Attributes:
        event: Proposed field values.
        correlation_id: Optional request correlation identifier.
    """

    event: EventInput
    correlation_id: Optional[str] = None

