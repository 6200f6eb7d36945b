"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- Both storage implementations, separately and parametrised together
- A file-backed SQLite database for the relational storage
- An HTTP client bound to an application built around a storage
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from heathen_index.core.settings import Settings
from heathen_index.features.entries.dtos import Category, EntryCreate
from heathen_index.features.entries.storage import (
    DatabaseStorage,
    MemoryStorage,
    Storage,
)
from heathen_index.main import create_app

STORAGE_BACKENDS = ["memory", "database"]


def sqlite_url(directory: Path) -> str:
    """Async SQLite URL for a database file inside ``directory``."""
    return f"sqlite+aiosqlite:///{directory / 'heathen_index.db'}"


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Provide test settings with testing mode enabled and seeding off."""
    return Settings(testing=True, seed_on_startup=False, storage_backend="memory")


@pytest_asyncio.fixture
async def memory_storage() -> AsyncGenerator[MemoryStorage, None]:
    """Provide a fresh in-memory storage."""
    storage = MemoryStorage()
    await storage.connect()
    yield storage
    await storage.disconnect()


@pytest_asyncio.fixture
async def database_storage(tmp_path: Path) -> AsyncGenerator[DatabaseStorage, None]:
    """Provide a relational storage over an empty SQLite database."""
    storage = DatabaseStorage.from_url(sqlite_url(tmp_path))
    await storage.connect()
    yield storage
    await storage.disconnect()


@pytest_asyncio.fixture(params=STORAGE_BACKENDS)
async def storage(
    request: pytest.FixtureRequest, tmp_path: Path
) -> AsyncGenerator[Storage, None]:
    """Provide each storage implementation in turn.

    Tests using this fixture run once per backend, which keeps the two
    implementations behaviourally identical.
    """
    if request.param == "database":
        instance: Storage = DatabaseStorage.from_url(sqlite_url(tmp_path))
    else:
        instance = MemoryStorage()

    await instance.connect()
    yield instance
    await instance.disconnect()


@pytest.fixture
def entry_data() -> Callable[..., EntryCreate]:
    """Factory for valid entry payloads with overridable fields."""

    def _make(**overrides: object) -> EntryCreate:
        fields: dict[str, object] = {
            "title": "Odin",
            "category": Category.DEITY,
            "description": "The All-Father of the Norse pantheon.",
            "related_terms": ["wisdom", "ravens"],
            "sources": "Prose Edda",
        }
        fields.update(overrides)
        return EntryCreate.model_validate(fields)

    return _make


@pytest_asyncio.fixture
async def client(
    test_settings: Settings, storage: Storage
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for an application serving from ``storage``.

    ASGITransport does not run the lifespan; the storage fixture has already
    connected the store.
    """
    app = create_app(settings=test_settings, storage=storage)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as http_client:
        yield http_client
