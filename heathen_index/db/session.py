"""SQLAlchemy engine and session management.

Engines and session factories are created explicitly and handed to the
components that need them; nothing here holds global state.
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

SessionProvider = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given connection string."""
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
    )


def create_session_provider(engine: AsyncEngine) -> SessionProvider:
    """Build a callable that opens a fresh session per use."""
    session_maker = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    @asynccontextmanager
    async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
        """Get a database session."""
        async with session_maker() as session:
            try:
                yield session
            finally:
                await session.close()

    return get_db_session


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create all registered tables that do not exist yet."""
    # Import models so they register with Base.metadata
    from heathen_index.features.auth import models as _auth_models  # noqa: F401
    from heathen_index.features.entries import models as _entry_models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine) -> None:
    """Drop all registered tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
