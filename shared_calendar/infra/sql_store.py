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

"""SQLAlchemy-backed calendar store.

Each unit of work is one database transaction: an event update and its
audit record are committed together or rolled back together.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterable, Iterator, List, Optional

from sqlalchemy import create_engine, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from shared_calendar.core.events.entities import (
    AuditRecord,
    ChangeEntry,
    Event,
    EventState,
    Profile,
)
from shared_calendar.core.events.exceptions import (
    DuplicateProfileNameError,
    EventNotFoundError,
    OptimisticLockError,
    StorageUnavailableError,
)
from shared_calendar.core.events.value_objects import (
    EventId,
    ProfileId,
    ProfileName,
)

from .locks import EventLockRegistry
from .sql_models import AuditRecordRow, Base, EventRow, ProfileRow

logger = logging.getLogger(__name__)


def _utc(value: datetime) -> datetime:
    """Re-attach UTC to datetimes returned naive by backends like SQLite."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url


class SqlCalendarStore:
    """CalendarStore implementation over any SQLAlchemy database URL."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """Initialize the store without connecting.

        Args:
            database_url: SQLAlchemy database URL.
            echo: Log emitted SQL statements.
        """
        self._database_url = database_url
        self._echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._event_locks = EventLockRegistry()

    @property
    def connected(self) -> bool:
        return self._session_factory is not None

    def connect(self) -> None:
        """Create the engine and ensure the schema exists.

        Raises:
            StorageUnavailableError: If the database cannot be reached.
        """
        kwargs = {}
        if self._database_url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(self._database_url):
                kwargs["poolclass"] = StaticPool
        try:
            engine = create_engine(self._database_url, echo=self._echo, **kwargs)
            Base.metadata.create_all(engine)
        except SQLAlchemyError as exc:
            logger.error("Failed to connect calendar database: %s", exc)
            raise StorageUnavailableError("connect") from exc

        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        logger.info("SQL calendar store connected (%s)", engine.url.get_backend_name())

    def disconnect(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("SQL calendar store disconnected")

    @contextmanager
    def unit_of_work(self) -> Iterator["SqlUnitOfWork"]:
        """Open a transaction, committed on clean exit.

        Raises:
            StorageUnavailableError: If not connected or the database fails.
        """
        if self._session_factory is None:
            raise StorageUnavailableError("unit_of_work")

        session = self._session_factory()
        try:
            yield SqlUnitOfWork(session)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Calendar transaction rolled back: %s", exc)
            raise StorageUnavailableError("unit_of_work") from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def lock_event(self, event_id: EventId):
        return self._event_locks.hold(event_id)


class SqlUnitOfWork:
    """Repositories sharing one SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.events = SqlEventRepository(session)
        self.audit_records = SqlAuditRecordRepository(session)
        self.profiles = SqlProfileRepository(session)


class SqlEventRepository:
    """EventRepository over an SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: EventRow) -> Event:
        return Event(
            event_id=EventId(row.id),
            state=EventState(
                title=row.title,
                description=row.description,
                start=_utc(row.start_at),
                end=_utc(row.end_at),
                timezone=row.timezone,
                assigned_to=tuple(ProfileId(pid) for pid in row.assigned_to),
            ),
            created_at=_utc(row.created_at),
            updated_at=_utc(row.updated_at),
            version=row.version,
        )

    def add(self, event: Event) -> None:
        self._session.add(EventRow(
            id=str(event.event_id),
            title=event.title,
            description=event.state.description,
            start_at=event.start,
            end_at=event.end,
            timezone=event.timezone,
            assigned_to=[str(pid) for pid in event.assigned_to],
            created_at=event.created_at,
            updated_at=event.updated_at,
            version=event.version,
        ))
        self._session.flush()

    def save(self, event: Event, expected_version: int) -> None:
        key = str(event.event_id)
        result = self._session.execute(
            update(EventRow)
            .where(EventRow.id == key, EventRow.version == expected_version)
            .values(
                title=event.title,
                description=event.state.description,
                start_at=event.start,
                end_at=event.end,
                timezone=event.timezone,
                assigned_to=[str(pid) for pid in event.assigned_to],
                updated_at=event.updated_at,
                version=event.version,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 1:
            return

        actual = self._session.execute(
            select(EventRow.version).where(EventRow.id == key)
        ).scalar_one_or_none()
        if actual is None:
            raise EventNotFoundError(key)
        raise OptimisticLockError(
            entity_type="Event",
            entity_id=key,
            expected_version=expected_version,
            actual_version=actual,
        )

    def find_by_id(self, event_id: EventId) -> Optional[Event]:
        row = self._session.execute(
            select(EventRow).where(EventRow.id == str(event_id))
        ).scalar_one_or_none()
        return self._to_entity(row) if row is not None else None

    def list_all(self, profile_id: Optional[ProfileId] = None) -> List[Event]:
        rows = self._session.execute(
            select(EventRow).order_by(EventRow.start_at, EventRow.created_at)
        ).scalars().all()
        if profile_id is not None:
            rows = [row for row in rows if str(profile_id) in row.assigned_to]
        return [self._to_entity(row) for row in rows]


class SqlAuditRecordRepository:
    """Append-only AuditRecordRepository over an SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def append(self, record: AuditRecord) -> None:
        self._session.add(AuditRecordRow(
            record_id=record.record_id,
            event_id=str(record.event_id),
            summary=record.summary,
            changes=[change.to_dict() for change in record.changes],
            created_at=record.created_at,
        ))
        self._session.flush()

    def list_by_event(self, event_id: EventId) -> List[AuditRecord]:
        rows = self._session.execute(
            select(AuditRecordRow)
            .where(AuditRecordRow.event_id == str(event_id))
            .order_by(AuditRecordRow.created_at.desc(), AuditRecordRow.sequence.desc())
        ).scalars().all()
        return [
            AuditRecord(
                record_id=row.record_id,
                event_id=EventId(row.event_id),
                changes=tuple(ChangeEntry.from_dict(item) for item in row.changes),
                summary=row.summary,
                created_at=_utc(row.created_at),
            )
            for row in rows
        ]


class SqlProfileRepository:
    """ProfileRepository over an SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: ProfileRow) -> Profile:
        return Profile(
            profile_id=ProfileId(row.id),
            name=ProfileName(row.name),
            timezone=row.timezone,
            created_at=_utc(row.created_at),
        )

    def add(self, profile: Profile) -> None:
        self._session.add(ProfileRow(
            id=str(profile.profile_id),
            name=str(profile.name),
            timezone=profile.timezone,
            created_at=profile.created_at,
        ))
        try:
            self._session.flush()
        except IntegrityError as exc:
            raise DuplicateProfileNameError(str(profile.name)) from exc

    def find_by_name(self, name: str) -> Optional[Profile]:
        row = self._session.execute(
            select(ProfileRow).where(ProfileRow.name == name)
        ).scalar_one_or_none()
        return self._to_entity(row) if row is not None else None

    def find_by_ids(self, profile_ids: Iterable[ProfileId]) -> List[Profile]:
        keys = [str(profile_id) for profile_id in profile_ids]
        if not keys:
            return []
        rows = self._session.execute(
            select(ProfileRow).where(ProfileRow.id.in_(keys))
        ).scalars().all()
        by_id = {row.id: row for row in rows}
        return [self._to_entity(by_id[key]) for key in keys if key in by_id]

    def list_all(self) -> List[Profile]:
        rows = self._session.execute(
            select(ProfileRow).order_by(ProfileRow.created_at.desc(), ProfileRow.id.desc())
        ).scalars().all()
        return [self._to_entity(row) for row in rows]
