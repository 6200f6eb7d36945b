"""Use case for listing entries with search, filtering and pagination."""

import logging

from fastapi import HTTPException, status

from heathen_index.features.entries.dtos import EntriesPage, ListEntriesRequest
from heathen_index.features.entries.pagination import paginate
from heathen_index.features.entries.query import apply_sort
from heathen_index.features.entries.storage import Storage

logger = logging.getLogger(__name__)


class ListEntriesUseCaseImpl:
    """Implementation of the list entries use case."""

    def __init__(self, storage: Storage):
        """Initialize the use case with dependencies.

        Args:
            storage: Entry storage
        """
        self.storage = storage

    async def execute(self, request: ListEntriesRequest) -> EntriesPage:
        """List one page of entries matching the request filters.

        Args:
            request: Search text, category, sort order and page coordinates

        Returns:
            Page envelope with the entries and pagination metadata

        Raises:
            HTTPException: 500 if storage fails
        """
        try:
            entries = await self.storage.search_entries(
                request.search, request.category
            )
        except Exception:
            logger.exception("List entries error")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch entries",
            )

        page = paginate(apply_sort(entries, request.sort), request.page, request.limit)

        return EntriesPage(
            entries=page.items,
            total=page.total,
            page=page.page,
            total_pages=page.total_pages,
        )
