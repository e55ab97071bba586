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

"""Infrastructure layer for identifier generation.

This module provides UUID v7 generation for event, profile and audit
record identifiers.
"""

import time
import uuid

from shared_calendar.core.events.repositories import IdGenerator


class UUIDv7Generator(IdGenerator):
    """UUID v7 generator implementation.

    Generates time-ordered UUIDs laid out as RFC 9562 version 7
    values, so identifiers sort roughly by creation time.
    """

    def generate(self) -> str:
        """Generate a new UUID v7 string.

        Returns:
            str: A new UUID v7 identifier.
        """
        return str(self._uuid7())

    def _uuid7(self) -> uuid.UUID:
        """Generate a UUID v7 using timestamp and random bytes.

        Returns:
            uuid.UUID: A UUID v7 object.
        """
        timestamp_ms = int(time.time() * 1000)
        timestamp_bytes = timestamp_ms.to_bytes(6, byteorder='big')

        random_bytes = uuid.uuid4().bytes

        uuid7_bytes = bytearray(16)
        uuid7_bytes[:6] = timestamp_bytes
        uuid7_bytes[6:] = random_bytes[6:]

        uuid7_bytes[6] = (0x07 << 4) | (uuid7_bytes[6] & 0x0f)
        uuid7_bytes[8] = 0x80 | (uuid7_bytes[8] & 0x3f)

        return uuid.UUID(bytes=bytes(uuid7_bytes))
