"""Entry API routes."""

from typing import Any, Protocol

from fastapi import APIRouter, Body, Depends, Query, status

from heathen_index.core.dependencies import (
    get_app_settings,
    get_current_user,
    get_storage,
)
from heathen_index.core.settings import Settings
from heathen_index.features.auth.dtos import User
from heathen_index.features.entries.dtos import (
    EntriesPage,
    Entry,
    EntrySort,
    ListEntriesRequest,
    MessageResponse,
    ValidationErrorResponse,
)
from heathen_index.features.entries.storage import Storage
from heathen_index.features.entries.usecases import (
    CreateEntryUseCaseImpl,
    DeleteEntryUseCaseImpl,
    GetEntryUseCaseImpl,
    ListEntriesUseCaseImpl,
    UpdateEntryUseCaseImpl,
)

router = APIRouter(prefix="/entries", tags=["entries"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}
_UNAUTHORIZED = {status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse}}


class ListEntriesUseCase(Protocol):
    """Protocol for the list entries use case."""

    async def execute(self, request: ListEntriesRequest) -> EntriesPage:
        """List entries with filtering and pagination."""
        ...


class GetEntryUseCase(Protocol):
    """Protocol for the get entry use case."""

    async def execute(self, entry_id: str) -> Entry:
        """Get a single entry by ID."""
        ...


class CreateEntryUseCase(Protocol):
    """Protocol for the create entry use case."""

    async def execute(self, payload: Any, actor_id: str) -> Entry:
        """Create a new entry."""
        ...


class UpdateEntryUseCase(Protocol):
    """Protocol for the update entry use case."""

    async def execute(self, entry_id: str, payload: Any, actor_id: str) -> Entry:
        """Update an existing entry."""
        ...


class DeleteEntryUseCase(Protocol):
    """Protocol for the delete entry use case."""

    async def execute(self, entry_id: str, actor_id: str) -> MessageResponse:
        """Delete an entry."""
        ...


async def get_list_entries_use_case(
    storage: Storage = Depends(get_storage),
) -> ListEntriesUseCase:
    """Dependency injection for the list entries use case."""
    return ListEntriesUseCaseImpl(storage=storage)


async def get_get_entry_use_case(
    storage: Storage = Depends(get_storage),
) -> GetEntryUseCase:
    """Dependency injection for the get entry use case."""
    return GetEntryUseCaseImpl(storage=storage)


async def get_create_entry_use_case(
    storage: Storage = Depends(get_storage),
) -> CreateEntryUseCase:
    """Dependency injection for the create entry use case."""
    return CreateEntryUseCaseImpl(storage=storage)


async def get_update_entry_use_case(
    storage: Storage = Depends(get_storage),
) -> UpdateEntryUseCase:
    """Dependency injection for the update entry use case."""
    return UpdateEntryUseCaseImpl(storage=storage)


async def get_delete_entry_use_case(
    storage: Storage = Depends(get_storage),
) -> DeleteEntryUseCase:
    """Dependency injection for the delete entry use case."""
    return DeleteEntryUseCaseImpl(storage=storage)


@router.get("", response_model=EntriesPage)
async def list_entries(
    search: str | None = None,
    category: str | None = None,
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    sort: EntrySort = Query(EntrySort.ALPHABETICAL),
    settings: Settings = Depends(get_app_settings),
    use_case: ListEntriesUseCase = Depends(get_list_entries_use_case),
) -> EntriesPage:
    """List entries with optional search and category filter.

    - `search` matches title, description and related terms, ignoring case
    - `category` keeps one category; `all` or omitted keeps every category
    - pages past the last one come back empty rather than failing
    """
    request = ListEntriesRequest(
        search=search or "",
        category=category,
        page=page,
        limit=limit or settings.default_page_size,
        sort=sort,
    )
    return await use_case.execute(request)


@router.get("/{entry_id}", response_model=Entry, responses=_NOT_FOUND)
async def get_entry(
    entry_id: str,
    use_case: GetEntryUseCase = Depends(get_get_entry_use_case),
) -> Entry:
    """Get a single entry by ID."""
    return await use_case.execute(entry_id)


@router.post(
    "",
    response_model=Entry,
    status_code=status.HTTP_201_CREATED,
    responses={**_INVALID, **_UNAUTHORIZED},
)
async def create_entry(
    payload: Any = Body(...),
    user: User = Depends(get_current_user),
    use_case: CreateEntryUseCase = Depends(get_create_entry_use_case),
) -> Entry:
    """Create a new entry attributed to the authenticated user."""
    return await use_case.execute(payload, user.id)


@router.put(
    "/{entry_id}",
    response_model=Entry,
    responses={**_INVALID, **_UNAUTHORIZED, **_NOT_FOUND},
)
async def update_entry(
    entry_id: str,
    payload: Any = Body(...),
    user: User = Depends(get_current_user),
    use_case: UpdateEntryUseCase = Depends(get_update_entry_use_case),
) -> Entry:
    """Update an entry. Fields missing from the body are left unchanged."""
    return await use_case.execute(entry_id, payload, user.id)


@router.delete(
    "/{entry_id}",
    response_model=MessageResponse,
    responses={**_UNAUTHORIZED, **_NOT_FOUND},
)
async def delete_entry(
    entry_id: str,
    user: User = Depends(get_current_user),
    use_case: DeleteEntryUseCase = Depends(get_delete_entry_use_case),
) -> MessageResponse:
    """Delete an entry."""
    return await use_case.execute(entry_id, user.id)
