"""Use case for deleting an entry."""

import logging

from fastapi import HTTPException, status

from heathen_index.features.entries.dtos import MessageResponse
from heathen_index.features.entries.storage import Storage

logger = logging.getLogger(__name__)


class DeleteEntryUseCaseImpl:
    """Implementation of the delete entry use case."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def execute(self, entry_id: str, actor_id: str) -> MessageResponse:
        """Delete an entry.

        Raises:
            HTTPException: 404 if the entry does not exist, 500 if storage fails
        """
        try:
            deleted = await self.storage.delete_entry(entry_id)
        except Exception:
            logger.exception("Delete entry error for %s", entry_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete entry",
            )

        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Entry not found",
            )

        logger.info("Entry %s deleted by %s", entry_id, actor_id)
        return MessageResponse(message="Entry deleted successfully")
