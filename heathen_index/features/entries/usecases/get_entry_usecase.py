"""Use case for getting a single entry by ID."""

import logging

from fastapi import HTTPException, status

from heathen_index.features.entries.dtos import Entry
from heathen_index.features.entries.storage import Storage

logger = logging.getLogger(__name__)


class GetEntryUseCaseImpl:
    """Implementation of the get entry use case."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def execute(self, entry_id: str) -> Entry:
        """Get a single entry by ID.

        Raises:
            HTTPException: 404 if the entry does not exist, 500 if storage fails
        """
        try:
            entry = await self.storage.get_entry(entry_id)
        except Exception:
            logger.exception("Get entry error for %s", entry_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch entry",
            )

        if entry is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Entry not found",
            )

        return entry
