"""Use case for creating an entry."""

import logging
from typing import Any

from fastapi import HTTPException, status

from heathen_index.features.entries.dtos import Entry
from heathen_index.features.entries.storage import Storage
from heathen_index.features.entries.validation import (
    EntryValidationError,
    validate_entry_create,
)

logger = logging.getLogger(__name__)


class CreateEntryUseCaseImpl:
    """Implementation of the create entry use case."""

    def __init__(self, storage: Storage):
        """Initialize the use case with dependencies.

        Args:
            storage: Entry storage
        """
        self.storage = storage

    async def execute(self, payload: Any, actor_id: str) -> Entry:
        """Validate ``payload`` and store it as a new entry.

        Args:
            payload: Raw request body
            actor_id: The authenticated user creating the entry

        Returns:
            The stored entry

        Raises:
            HTTPException: 400 with field errors if the payload is invalid,
                500 if storage fails
        """
        try:
            data = validate_entry_create(payload)
        except EntryValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": str(e), "errors": e.errors},
            )

        try:
            entry = await self.storage.create_entry(data, actor_id)
        except Exception:
            logger.exception("Create entry error")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create entry",
            )

        logger.info("Entry %s created by %s", entry.id, actor_id)
        return entry
