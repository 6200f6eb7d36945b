"""User data transfer objects."""

from datetime import datetime

from pydantic import Field

from heathen_index.features.entries.dtos import CamelModel


class UpsertUser(CamelModel):
    """Profile data received from the identity provider."""

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class User(UpsertUser):
    """A stored user record."""

    created_at: datetime = Field(..., description="First successful login")
    updated_at: datetime = Field(..., description="Most recent profile refresh")
