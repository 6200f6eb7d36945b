"""Relational storage backed by SQLAlchemy.

Each operation runs in its own session and transaction; there is no
atomicity across operations. Text search is applied in Python after the
category filter is pushed into SQL, so results match ``MemoryStorage``
exactly but every row of the category is loaded per search.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from heathen_index.core.clock import ensure_utc, now_utc, touched_at
from heathen_index.core.exceptions import StorageError
from heathen_index.db.session import (
    SessionProvider,
    create_all_tables,
    create_engine,
    create_session_provider,
)
from heathen_index.features.auth.dtos import UpsertUser, User
from heathen_index.features.auth.models import UserRecord
from heathen_index.features.entries.dtos import Entry, EntryCreate, EntryUpdate
from heathen_index.features.entries.models import EntryRecord
from heathen_index.features.entries.query import (
    ALL_CATEGORIES,
    filter_entries,
    sort_by_title,
)

logger = logging.getLogger(__name__)


def _to_entry(record: EntryRecord) -> Entry:
    return Entry(
        id=record.id,
        title=record.title,
        category=record.category,
        description=record.description,
        related_terms=(
            list(record.related_terms) if record.related_terms is not None else None
        ),
        sources=record.sources,
        created_at=ensure_utc(record.created_at),
        updated_at=ensure_utc(record.updated_at),
        created_by=record.created_by,
    )


def _to_user(record: UserRecord) -> User:
    return User(
        id=record.id,
        email=record.email,
        first_name=record.first_name,
        last_name=record.last_name,
        profile_image_url=record.profile_image_url,
        created_at=ensure_utc(record.created_at),
        updated_at=ensure_utc(record.updated_at),
    )


class DatabaseStorage:
    """Storage implementation persisting to relational tables."""

    def __init__(
        self,
        engine: AsyncEngine,
        get_db_session: SessionProvider | None = None,
    ):
        """Initialize the storage with dependencies.

        Args:
            engine: Async engine, owned by this storage and disposed on disconnect
            get_db_session: Function to get database session; defaults to one
                bound to ``engine``
        """
        self.engine = engine
        self.get_db_session = get_db_session or create_session_provider(engine)

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "DatabaseStorage":
        """Build a storage with its own engine for ``database_url``."""
        return cls(create_engine(database_url, echo=echo))

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        async with self.get_db_session() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Database error during %s", operation)
                raise StorageError(f"Failed to {operation}") from e

    async def connect(self) -> None:
        try:
            await create_all_tables(self.engine)
        except SQLAlchemyError as e:
            logger.exception("Could not prepare database tables")
            raise StorageError("Failed to connect to database") from e
        logger.info("Database storage ready")

    async def disconnect(self) -> None:
        await self.engine.dispose()

    async def get_entry(self, entry_id: str) -> Entry | None:
        async with self._session("get entry") as session:
            record = await session.get(EntryRecord, entry_id)
            return _to_entry(record) if record else None

    async def get_all_entries(self) -> list[Entry]:
        async with self._session("list entries") as session:
            result = await session.execute(select(EntryRecord))
            return sort_by_title(_to_entry(r) for r in result.scalars().all())

    async def count_entries(self) -> int:
        async with self._session("count entries") as session:
            result = await session.execute(
                select(func.count()).select_from(EntryRecord)
            )
            return result.scalar() or 0

    async def search_entries(
        self, query: str, category: str | None = None
    ) -> list[Entry]:
        stmt = select(EntryRecord)
        if category and category.lower() != ALL_CATEGORIES:
            stmt = stmt.where(func.lower(EntryRecord.category) == category.lower())

        async with self._session("search entries") as session:
            result = await session.execute(stmt)
            entries = [_to_entry(r) for r in result.scalars().all()]

        return filter_entries(entries, query)

    async def create_entry(self, data: EntryCreate, actor_id: str) -> Entry:
        now = now_utc()
        record = EntryRecord(
            title=data.title,
            category=data.category.value,
            description=data.description,
            related_terms=list(data.related_terms),
            sources=data.sources,
            created_at=now,
            updated_at=now,
            created_by=actor_id,
        )

        async with self._session("create entry") as session:
            session.add(record)
            await session.commit()
            return _to_entry(record)

    async def update_entry(
        self, entry_id: str, updates: EntryUpdate, actor_id: str
    ) -> Entry | None:
        async with self._session("update entry") as session:
            record = await session.get(EntryRecord, entry_id)
            if record is None:
                return None

            for field, value in updates.changes().items():
                if field == "category":
                    value = value.value
                elif field == "related_terms" and value is not None:
                    value = list(value)
                setattr(record, field, value)
            record.updated_at = touched_at(record.updated_at)

            await session.commit()
            logger.debug("Entry %s updated by %s", entry_id, actor_id)
            return _to_entry(record)

    async def delete_entry(self, entry_id: str) -> bool:
        async with self._session("delete entry") as session:
            record = await session.get(EntryRecord, entry_id)
            if record is None:
                return False

            await session.delete(record)
            await session.commit()
            return True

    async def get_user(self, user_id: str) -> User | None:
        async with self._session("get user") as session:
            record = await session.get(UserRecord, user_id)
            return _to_user(record) if record else None

    async def upsert_user(self, data: UpsertUser) -> User:
        async with self._session("upsert user") as session:
            record = await session.get(UserRecord, data.id)
            if record is None:
                now = now_utc()
                record = UserRecord(
                    **data.model_dump(), created_at=now, updated_at=now
                )
                session.add(record)
            else:
                for field, value in data.model_dump(exclude={"id"}).items():
                    setattr(record, field, value)
                record.updated_at = touched_at(record.updated_at)

            await session.commit()
            return _to_user(record)
