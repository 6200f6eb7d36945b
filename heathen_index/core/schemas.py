from pydantic import BaseModel

SYSTEM_ACTOR = "system"


class AuthenticatedUser(BaseModel):
    """Represents an authenticated user, as described by token claims."""

    user_id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
