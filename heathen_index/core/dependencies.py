"""FastAPI dependencies for storage access and the current user."""

import logging

from fastapi import Depends, HTTPException, Request, status

from heathen_index.core.authentication import verify_auth
from heathen_index.core.exceptions import StorageError
from heathen_index.core.schemas import AuthenticatedUser
from heathen_index.core.settings import Settings, get_settings
from heathen_index.features.auth.dtos import UpsertUser, User
from heathen_index.features.entries.storage import Storage

logger = logging.getLogger(__name__)


def get_storage(request: Request) -> Storage:
    """Storage instance attached to the application at startup."""
    storage: Storage | None = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage has not been configured on the application")
    return storage


async def get_current_user(
    auth: AuthenticatedUser = Depends(verify_auth),
    storage: Storage = Depends(get_storage),
) -> User:
    """Resolve the authenticated user, refreshing their stored profile.

    Every successful authentication upserts the user record.
    """
    try:
        return await storage.upsert_user(
            UpsertUser(
                id=auth.user_id,
                email=auth.email,
                first_name=auth.first_name,
                last_name=auth.last_name,
                profile_image_url=auth.profile_image_url,
            )
        )
    except StorageError:
        logger.exception("Failed to record user %s", auth.user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to authenticate user",
        )


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings or get_settings()
