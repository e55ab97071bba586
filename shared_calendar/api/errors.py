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

"""Translation of domain errors into HTTP responses."""

import logging

from fastapi import HTTPException, status

from shared_calendar.core.events.exceptions import CalendarDomainError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_TIMEZONE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_DATETIME: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_NAME: status.HTTP_409_CONFLICT,
    ErrorKind.CONCURRENT_MODIFICATION: status.HTTP_409_CONFLICT,
    ErrorKind.STORAGE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(exc: CalendarDomainError) -> HTTPException:
    """Map a domain error to an HTTPException with a structured detail.

    The detail carries the stable error kind and the human-readable message::

        {"error": "invalid_range", "message": "End time must be after ..."}
    """
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error("Request failed: %s", exc.message)
    else:
        logger.warning("Request rejected (%s): %s", exc.kind.value, exc.message)

    detail = {"error": exc.kind.value, "message": exc.message}
    if exc.correlation_id:
        detail["correlation_id"] = exc.correlation_id
    return HTTPException(status_code=status_code, detail=detail)
