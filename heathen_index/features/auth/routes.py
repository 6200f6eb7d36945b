"""Authentication API routes.

Login and logout redirects belong to the identity provider; this service
only reports who the current session belongs to.
"""

from fastapi import APIRouter, Depends, status

from heathen_index.core.dependencies import get_current_user
from heathen_index.features.auth.dtos import User
from heathen_index.features.entries.dtos import MessageResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "/user",
    response_model=User,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse}},
)
async def get_authenticated_user(user: User = Depends(get_current_user)) -> User:
    """Return the signed-in user's profile, refreshed from the token claims."""
    return user
