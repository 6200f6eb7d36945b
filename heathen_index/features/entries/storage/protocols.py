"""Protocol definition for entry and user storage."""

from typing import Protocol

from heathen_index.features.auth.dtos import UpsertUser, User
from heathen_index.features.entries.dtos import Entry, EntryCreate, EntryUpdate


class Storage(Protocol):
    """Protocol for the knowledge-base store.

    Absence is signalled by ``None`` (or ``False`` for deletes) rather than
    by raising. Returned records are copies; mutating them does not change
    stored state.
    """

    async def connect(self) -> None:
        """Prepare the store for use."""
        ...

    async def disconnect(self) -> None:
        """Release any resources held by the store."""
        ...

    async def get_entry(self, entry_id: str) -> Entry | None:
        """Fetch one entry by id."""
        ...

    async def get_all_entries(self) -> list[Entry]:
        """Every entry, ordered by title."""
        ...

    async def count_entries(self) -> int:
        """Number of stored entries."""
        ...

    async def search_entries(
        self, query: str, category: str | None = None
    ) -> list[Entry]:
        """Entries matching the text query and category, ordered by title."""
        ...

    async def create_entry(self, data: EntryCreate, actor_id: str) -> Entry:
        """Persist a new entry attributed to ``actor_id``."""
        ...

    async def update_entry(
        self, entry_id: str, updates: EntryUpdate, actor_id: str
    ) -> Entry | None:
        """Apply the supplied fields of ``updates`` to an existing entry."""
        ...

    async def delete_entry(self, entry_id: str) -> bool:
        """Remove an entry; False when it did not exist."""
        ...

    async def get_user(self, user_id: str) -> User | None:
        """Fetch one user by id."""
        ...

    async def upsert_user(self, data: UpsertUser) -> User:
        """Insert or refresh a user profile."""
        ...
