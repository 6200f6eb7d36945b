"""In-memory storage backed by process-local dicts.

Mutations never await, so the event loop serialises them without locks.
Nothing survives a restart.
"""

import logging
import uuid

from heathen_index.core.clock import now_utc, touched_at
from heathen_index.features.auth.dtos import UpsertUser, User
from heathen_index.features.entries.dtos import Entry, EntryCreate, EntryUpdate
from heathen_index.features.entries.query import filter_entries, sort_by_title

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Storage implementation holding entries and users in dicts."""

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}
        self._users: dict[str, User] = {}

    async def connect(self) -> None:
        logger.info("Using in-memory storage; data will not persist")

    async def disconnect(self) -> None:
        pass

    async def get_entry(self, entry_id: str) -> Entry | None:
        entry = self._entries.get(entry_id)
        return entry.model_copy(deep=True) if entry else None

    async def get_all_entries(self) -> list[Entry]:
        ordered = sort_by_title(self._entries.values())
        return [entry.model_copy(deep=True) for entry in ordered]

    async def count_entries(self) -> int:
        return len(self._entries)

    async def search_entries(
        self, query: str, category: str | None = None
    ) -> list[Entry]:
        matches = filter_entries(self._entries.values(), query, category)
        return [entry.model_copy(deep=True) for entry in matches]

    async def create_entry(self, data: EntryCreate, actor_id: str) -> Entry:
        entry_id = str(uuid.uuid4())
        while entry_id in self._entries:
            entry_id = str(uuid.uuid4())

        now = now_utc()
        entry = Entry(
            id=entry_id,
            title=data.title,
            category=data.category,
            description=data.description,
            related_terms=list(data.related_terms),
            sources=data.sources,
            created_at=now,
            updated_at=now,
            created_by=actor_id,
        )
        self._entries[entry_id] = entry
        return entry.model_copy(deep=True)

    async def update_entry(
        self, entry_id: str, updates: EntryUpdate, actor_id: str
    ) -> Entry | None:
        entry = self._entries.get(entry_id)
        if entry is None:
            return None

        updated = entry.model_copy(
            update={**updates.changes(), "updated_at": touched_at(entry.updated_at)},
            deep=True,
        )
        self._entries[entry_id] = updated
        logger.debug("Entry %s updated by %s", entry_id, actor_id)
        return updated.model_copy(deep=True)

    async def delete_entry(self, entry_id: str) -> bool:
        return self._entries.pop(entry_id, None) is not None

    async def get_user(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy(deep=True) if user else None

    async def upsert_user(self, data: UpsertUser) -> User:
        existing = self._users.get(data.id)
        if existing is None:
            now = now_utc()
            user = User(**data.model_dump(), created_at=now, updated_at=now)
        else:
            user = existing.model_copy(
                update={
                    **data.model_dump(exclude={"id"}),
                    "updated_at": touched_at(existing.updated_at),
                }
            )
        self._users[data.id] = user
        return user.model_copy(deep=True)
