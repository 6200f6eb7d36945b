"""Use case for updating an entry."""

import logging
from typing import Any

from fastapi import HTTPException, status

from heathen_index.features.entries.dtos import Entry
from heathen_index.features.entries.storage import Storage
from heathen_index.features.entries.validation import (
    EntryValidationError,
    validate_entry_update,
)

logger = logging.getLogger(__name__)


class UpdateEntryUseCaseImpl:
    """Implementation of the update entry use case."""

    def __init__(self, storage: Storage):
        """Initialize the use case with dependencies.

        Args:
            storage: Entry storage
        """
        self.storage = storage

    async def execute(self, entry_id: str, payload: Any, actor_id: str) -> Entry:
        """Apply the fields present in ``payload`` to an existing entry.

        Args:
            entry_id: The entry to update
            payload: Raw request body holding any subset of entry fields
            actor_id: The authenticated user making the change

        Returns:
            The updated entry

        Raises:
            HTTPException: 400 if the payload is invalid, 404 if the entry
                does not exist, 500 if storage fails
        """
        try:
            updates = validate_entry_update(payload)
        except EntryValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": str(e), "errors": e.errors},
            )

        try:
            entry = await self.storage.update_entry(entry_id, updates, actor_id)
        except Exception:
            logger.exception("Update entry error for %s", entry_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update entry",
            )

        if entry is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Entry not found",
            )

        return entry
