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

"""Unit tests for temporal normalization."""

from datetime import datetime, timedelta, timezone

import pytest

from shared_calendar.core.events.exceptions import (
    InvalidDateTimeError,
    InvalidTimezoneError,
)
from shared_calendar.core.events.temporal import (
    compare_instants,
    format_for_zone,
    resolve_zone,
    to_instant,
)
from shared_calendar.core.events.value_objects import Ordering


class TestToInstant:
    """Tests for to_instant."""

    def test_new_york_daylight_time(self):
        """EDT is UTC-4."""
        instant = to_instant("2024-03-11", "09:00", "America/New_York")
        assert instant == datetime(2024, 3, 11, 13, 0, tzinfo=timezone.utc)
        assert instant.utcoffset() == timedelta(0)

    def test_new_york_standard_time(self):
        """EST is UTC-5."""
        instant = to_instant("2024-01-15", "09:00", "America/New_York")
        assert instant == datetime(2024, 1, 15, 14, 0, tzinfo=timezone.utc)

    def test_seconds_accepted(self):
        instant = to_instant("2024-01-15", "09:00:30", "UTC")
        assert instant == datetime(2024, 1, 15, 9, 0, 30, tzinfo=timezone.utc)

    def test_same_moment_from_different_zones(self):
        """Readings of the same moment in two zones give equal instants."""
        tokyo = to_instant("2024-03-11", "22:00", "Asia/Tokyo")
        new_york = to_instant("2024-03-11", "09:00", "America/New_York")
        assert tokyo == new_york

    @pytest.mark.parametrize("zone", ["Mars/Olympus_Mons", "", "   ", "../etc/passwd"])
    def test_unknown_zone(self, zone):
        with pytest.raises(InvalidTimezoneError):
            to_instant("2024-03-11", "09:00", zone)

    @pytest.mark.parametrize(
        "date_text, time_text",
        [
            ("2024-02-30", "09:00"),
            ("2024-13-01", "09:00"),
            ("not-a-date", "09:00"),
            ("2024-03-11", "25:00"),
            ("2024-03-11", "9am"),
            ("2024-03-11", "09:00+02:00"),
            ("20240311", "09:00"),
            ("2024-W11-1", "09:00"),
            ("2024-3-11", "09:00"),
            ("2024-03-11", "0900"),
            ("2024-03-11", "T09"),
            ("2024-03-11", "9:00"),
            ("2024-03-11", "09:00:00.250"),
            ("2024-03-11", "23:59:60"),
        ],
    )
    def test_invalid_date_or_time(self, date_text, time_text):
        with pytest.raises(InvalidDateTimeError):
            to_instant(date_text, time_text, "UTC")

    def test_timezone_checked_before_date(self):
        """An unknown zone is reported even when the date is also bad."""
        with pytest.raises(InvalidTimezoneError):
            to_instant("bad", "bad", "Nowhere/Land")


class TestResolveZone:
    """Tests for resolve_zone."""

    def test_known_zone(self):
        assert resolve_zone("Europe/Paris").key == "Europe/Paris"


class TestCompareInstants:
    """Tests for compare_instants."""

    def test_before_after_equal(self):
        early = datetime(2024, 3, 11, 13, 0, tzinfo=timezone.utc)
        late = datetime(2024, 3, 11, 14, 0, tzinfo=timezone.utc)
        assert compare_instants(early, late) == Ordering.BEFORE
        assert compare_instants(late, early) == Ordering.AFTER
        assert compare_instants(early, early) == Ordering.EQUAL

    def test_equal_across_offsets(self):
        """Comparison should ignore the offset the instant is expressed in."""
        utc = datetime(2024, 3, 11, 13, 0, tzinfo=timezone.utc)
        eastern = datetime(2024, 3, 11, 9, 0, tzinfo=timezone(timedelta(hours=-4)))
        assert compare_instants(utc, eastern) == Ordering.EQUAL

    def test_naive_rejected(self):
        with pytest.raises(InvalidDateTimeError):
            compare_instants(
                datetime(2024, 3, 11, 13, 0),
                datetime(2024, 3, 11, 13, 0, tzinfo=timezone.utc),
            )


class TestFormatForZone:
    """Tests for format_for_zone."""

    def test_renders_local_time(self):
        instant = datetime(2024, 3, 11, 13, 0, tzinfo=timezone.utc)
        assert format_for_zone(instant, "America/New_York") == "2024-03-11 09:00 EDT"
        assert format_for_zone(instant, "UTC") == "2024-03-11 13:00 UTC"

    def test_unknown_zone(self):
        with pytest.raises(InvalidTimezoneError):
            format_for_zone(datetime(2024, 3, 11, tzinfo=timezone.utc), "Nowhere/Land")
