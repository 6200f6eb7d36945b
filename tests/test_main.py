"""Tests for application assembly and lifespan."""

import pytest
from httpx import ASGITransport, AsyncClient

from heathen_index.core.settings import Settings
from heathen_index.features.entries.storage import MemoryStorage
from heathen_index.main import create_app


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_lifespan_seeds_storage(test_settings: Settings) -> None:
    settings = test_settings.model_copy(update={"seed_on_startup": True})
    storage = MemoryStorage()
    app = create_app(settings=settings, storage=storage)

    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as http_client:
            response = await http_client.get("/api/entries", params={"limit": 2})

    body = response.json()
    assert body["total"] == 6
    assert body["totalPages"] == 3
    assert [e["title"] for e in body["entries"]] == ["Freya", "Mjölnir"]


@pytest.mark.asyncio
async def test_default_page_size_comes_from_settings(test_settings: Settings) -> None:
    settings = test_settings.model_copy(
        update={"seed_on_startup": True, "default_page_size": 4}
    )
    app = create_app(settings=settings, storage=MemoryStorage())

    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as http_client:
            response = await http_client.get("/api/entries")

    assert len(response.json()["entries"]) == 4
    assert response.json()["totalPages"] == 2


def test_builds_configured_storage(test_settings: Settings) -> None:
    app = create_app(settings=test_settings)

    assert isinstance(app.state.storage, MemoryStorage)
