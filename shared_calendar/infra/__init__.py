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

"""Infrastructure adapters for the shared calendar."""

from .id_generator import UUIDv7Generator
from .locks import EventLockRegistry
from .memory_store import MemoryCalendarStore
from .sql_store import SqlCalendarStore

__all__ = [
    "EventLockRegistry",
    "MemoryCalendarStore",
    "SqlCalendarStore",
    "UUIDv7Generator",
]
