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

"""Unit tests for EventLockRegistry."""

import threading
import time

from shared_calendar.core.events.value_objects import EventId
from shared_calendar.infra.locks import EventLockRegistry

OTHER_EVENT_ID = EventId("018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a98")


class TestEventLockRegistry:
    """Tests for EventLockRegistry."""

    def test_released_locks_are_dropped(self, sample_event_id):
        registry = EventLockRegistry()
        with registry.hold(sample_event_id):
            assert len(registry) == 1
        assert len(registry) == 0

    def test_same_event_is_serialized(self, sample_event_id):
        registry = EventLockRegistry()
        active = []
        overlaps = []

        def worker():
            with registry.hold(sample_event_id):
                active.append(1)
                if len(active) > 1:
                    overlaps.append(True)
                time.sleep(0.01)
                active.pop()

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert overlaps == []
        assert len(registry) == 0

    def test_different_events_do_not_block(self, sample_event_id):
        registry = EventLockRegistry()
        acquired = threading.Event()

        def other():
            with registry.hold(OTHER_EVENT_ID):
                acquired.set()

        with registry.hold(sample_event_id):
            thread = threading.Thread(target=other)
            thread.start()
            assert acquired.wait(timeout=1)
            thread.join()

    def test_released_on_exception(self, sample_event_id):
        registry = EventLockRegistry()
        try:
            with registry.hold(sample_event_id):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert len(registry) == 0
        with registry.hold(sample_event_id):
            pass
