"""Behavioural contract shared by every storage implementation.

Each test runs once against MemoryStorage and once against DatabaseStorage.
"""

from collections.abc import Callable

import pytest

from heathen_index.features.auth.dtos import UpsertUser
from heathen_index.features.entries.dtos import Category, EntryCreate, EntryUpdate
from heathen_index.features.entries.storage import Storage


async def _seed_example(
    storage: Storage, entry_data: Callable[..., EntryCreate]
) -> None:
    await storage.create_entry(entry_data(title="Odin", category="deity"), "system")
    await storage.create_entry(
        entry_data(
            title="Valhalla",
            category="place",
            description="Hall of the slain.",
            related_terms=["afterlife"],
        ),
        "system",
    )
    await storage.create_entry(
        entry_data(
            title="Freya",
            category="deity",
            description="Goddess of love.",
            related_terms=["seidr"],
        ),
        "system",
    )


class TestCreateAndGet:
    """Creating entries and reading them back."""

    @pytest.mark.asyncio
    async def test_created_entry_reads_back_equal(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        created = await storage.create_entry(entry_data(), "user-1")

        fetched = await storage.get_entry(created.id)

        assert fetched == created
        assert created.created_at == created.updated_at
        assert created.created_by == "user-1"
        assert created.category is Category.DEITY
        assert created.related_terms == ["wisdom", "ravens"]

    @pytest.mark.asyncio
    async def test_ids_are_unique(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        first = await storage.create_entry(entry_data(), "system")
        second = await storage.create_entry(entry_data(), "system")

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_missing_related_terms_default_to_empty(
        self, storage: Storage
    ) -> None:
        data = EntryCreate.model_validate(
            {"title": "Loki", "category": "deity", "description": "Trickster."}
        )

        entry = await storage.create_entry(data, "system")

        assert entry.related_terms == []
        assert entry.sources is None

    @pytest.mark.asyncio
    async def test_get_unknown_entry_returns_none(self, storage: Storage) -> None:
        assert await storage.get_entry("does-not-exist") is None

    @pytest.mark.asyncio
    async def test_returned_entries_are_copies(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        created = await storage.create_entry(entry_data(), "system")
        assert created.related_terms is not None
        created.related_terms.append("mutated")

        fetched = await storage.get_entry(created.id)

        assert fetched is not None
        assert fetched.related_terms == ["wisdom", "ravens"]


class TestUpdate:
    """Partial updates and timestamp handling."""

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        created = await storage.create_entry(entry_data(), "system")

        updated = await storage.update_entry(
            created.id, EntryUpdate.model_validate({"title": "Wotan"}), "user-2"
        )

        assert updated is not None
        assert updated.title == "Wotan"
        assert updated.description == created.description
        assert updated.related_terms == created.related_terms
        assert updated.sources == created.sources
        assert updated.created_at == created.created_at
        assert updated.created_by == "system"

    @pytest.mark.asyncio
    async def test_update_is_persisted(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        created = await storage.create_entry(entry_data(), "system")

        await storage.update_entry(
            created.id,
            EntryUpdate.model_validate(
                {"relatedTerms": ["gungnir"], "category": "concept"}
            ),
            "system",
        )

        fetched = await storage.get_entry(created.id)
        assert fetched is not None
        assert fetched.related_terms == ["gungnir"]
        assert fetched.category is Category.CONCEPT

    @pytest.mark.asyncio
    async def test_updated_at_never_decreases(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        created = await storage.create_entry(entry_data(), "system")
        previous = created.updated_at

        for title in ("One", "Two", "Three"):
            updated = await storage.update_entry(
                created.id, EntryUpdate.model_validate({"title": title}), "system"
            )
            assert updated is not None
            assert updated.updated_at >= previous
            assert updated.updated_at >= updated.created_at
            previous = updated.updated_at

    @pytest.mark.asyncio
    async def test_update_unknown_entry_returns_none(self, storage: Storage) -> None:
        result = await storage.update_entry(
            "does-not-exist", EntryUpdate.model_validate({"title": "X"}), "system"
        )

        assert result is None


class TestDelete:
    """Deleting entries."""

    @pytest.mark.asyncio
    async def test_delete_existing_entry(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        created = await storage.create_entry(entry_data(), "system")

        assert await storage.delete_entry(created.id) is True
        assert await storage.get_entry(created.id) is None
        assert await storage.delete_entry(created.id) is False

    @pytest.mark.asyncio
    async def test_delete_unknown_entry_leaves_size_unchanged(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await storage.create_entry(entry_data(), "system")

        assert await storage.delete_entry("does-not-exist") is False
        assert await storage.count_entries() == 1
        assert len(await storage.get_all_entries()) == 1


class TestSearch:
    """Filtering and ordering through the storage interface."""

    @pytest.mark.asyncio
    async def test_text_query(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await _seed_example(storage, entry_data)

        results = await storage.search_entries("fr", None)

        assert [e.title for e in results] == ["Freya"]

    @pytest.mark.asyncio
    async def test_category_filter_is_alphabetical(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await _seed_example(storage, entry_data)

        results = await storage.search_entries("", "deity")

        assert [e.title for e in results] == ["Freya", "Odin"]

    @pytest.mark.asyncio
    async def test_category_filter_ignores_case(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await _seed_example(storage, entry_data)

        results = await storage.search_entries("", "PLACE")

        assert [e.title for e in results] == ["Valhalla"]

    @pytest.mark.asyncio
    async def test_wildcard_matches_get_all(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await _seed_example(storage, entry_data)

        everything = await storage.get_all_entries()

        assert await storage.search_entries("", "all") == everything
        assert await storage.search_entries("", None) == everything
        assert [e.title for e in everything] == ["Freya", "Odin", "Valhalla"]

    @pytest.mark.asyncio
    async def test_related_terms_match(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await _seed_example(storage, entry_data)

        results = await storage.search_entries("AFTER", None)

        assert [e.title for e in results] == ["Valhalla"]

    @pytest.mark.asyncio
    async def test_query_and_category_combine(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await _seed_example(storage, entry_data)

        assert await storage.search_entries("hall", "deity") == []
        assert [e.title for e in await storage.search_entries("hall", "place")] == [
            "Valhalla"
        ]

    @pytest.mark.asyncio
    async def test_no_match_is_empty(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await _seed_example(storage, entry_data)

        assert await storage.search_entries("jotunheim", None) == []

    @pytest.mark.asyncio
    async def test_search_is_idempotent(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        await _seed_example(storage, entry_data)

        first = await storage.search_entries("o", "all")
        second = await storage.search_entries("o", "all")

        assert first == second

    @pytest.mark.asyncio
    async def test_accented_titles_sort_with_their_base_letter(
        self, storage: Storage, entry_data: Callable[..., EntryCreate]
    ) -> None:
        for title in ("Odin", "Mjölnir", "loki", "Ragnarök"):
            await storage.create_entry(entry_data(title=title), "system")

        titles = [e.title for e in await storage.get_all_entries()]

        assert titles == ["loki", "Mjölnir", "Odin", "Ragnarök"]


class TestUsers:
    """User upserts."""

    @pytest.mark.asyncio
    async def test_upsert_inserts_then_refreshes(self, storage: Storage) -> None:
        created = await storage.upsert_user(
            UpsertUser(id="user-1", email="sigrun@example.com", first_name="Sigrun")
        )

        refreshed = await storage.upsert_user(
            UpsertUser(id="user-1", email="sigrun@valhalla.example", first_name="Sigrun")
        )

        assert refreshed.created_at == created.created_at
        assert refreshed.updated_at >= created.updated_at
        assert refreshed.email == "sigrun@valhalla.example"
        assert await storage.get_user("user-1") == refreshed

    @pytest.mark.asyncio
    async def test_get_unknown_user_returns_none(self, storage: Storage) -> None:
        assert await storage.get_user("nobody") is None
