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

"""Temporal normalization between local wall-clock readings and instants.

Instants are timezone-aware ``datetime`` objects pinned to UTC. Every
comparison in the domain happens on instants, never on local strings, so
two events authored in different zones order correctly without converting
one into the other's zone.
"""

import re
from datetime import datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import InvalidDateTimeError, InvalidTimezoneError
from .value_objects import Ordering

DISPLAY_FORMAT = "%Y-%m-%d %H:%M %Z"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2})?")


@lru_cache(maxsize=256)
def resolve_zone(name: str) -> ZoneInfo:
    """Return the ZoneInfo for an IANA name.

    Raises:
        InvalidTimezoneError: If the name is not a known IANA zone.
    """
    if not name or not name.strip():
        raise InvalidTimezoneError(name)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimezoneError(name) from exc


def to_instant(date_text: str, time_text: str, timezone_name: str) -> datetime:
    """Convert a local (date, time, zone) reading into a UTC instant.

    Args:
        date_text: Calendar date as ``YYYY-MM-DD``.
        time_text: Clock time as ``HH:MM`` or ``HH:MM:SS``.
        timezone_name: IANA zone the reading was taken in.

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        InvalidTimezoneError: If the zone is unknown.
        InvalidDateTimeError: If the date or time cannot be parsed.
    """
    zone = resolve_zone(timezone_name)
    reading = f"{date_text} {time_text}"
    if not (
        isinstance(date_text, str)
        and isinstance(time_text, str)
        and DATE_PATTERN.fullmatch(date_text)
        and TIME_PATTERN.fullmatch(time_text)
    ):
        raise InvalidDateTimeError(reading)
    time_format = "%H:%M:%S" if len(time_text) == 8 else "%H:%M"
    try:
        local_date = datetime.strptime(date_text, "%Y-%m-%d").date()
        local_time = datetime.strptime(time_text, time_format).time()
    except ValueError as exc:
        raise InvalidDateTimeError(reading) from exc

    # fold=0 picks the earlier offset for ambiguous or skipped local times
    local = datetime.combine(local_date, local_time).replace(tzinfo=zone, fold=0)
    return local.astimezone(timezone.utc)


def ensure_instant(value: datetime) -> datetime:
    """Validate that a datetime is an absolute instant and pin it to UTC."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidDateTimeError(value.isoformat())
    return value.astimezone(timezone.utc)


def compare_instants(first: datetime, second: datetime) -> Ordering:
    """Compare two instants irrespective of the zone they carry."""
    first = ensure_instant(first)
    second = ensure_instant(second)
    if first < second:
        return Ordering.BEFORE
    if first > second:
        return Ordering.AFTER
    return Ordering.EQUAL


def format_for_zone(instant: datetime, timezone_name: str) -> str:
    """Render an instant as local wall-clock text in the given zone."""
    zone = resolve_zone(timezone_name)
    return ensure_instant(instant).astimezone(zone).strftime(DISPLAY_FORMAT)
