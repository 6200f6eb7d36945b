"""Entry data transfer objects for API requests and responses.

JSON uses camelCase keys; snake_case keys are accepted on input as well.
"""

import enum
from datetime import datetime
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
)
from pydantic.alias_generators import to_camel


class Category(str, enum.Enum):
    """Closed set of entry classifications."""

    DEITY = "deity"
    PLACE = "place"
    CONCEPT = "concept"
    ARTIFACT = "artifact"
    CREATURE = "creature"
    EVENT = "event"


class EntrySort(str, enum.Enum):
    """Orderings offered by the list endpoint."""

    ALPHABETICAL = "alphabetical"
    RECENT = "recent"


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


def _normalize_category(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _none_to_list(value: object) -> object:
    return [] if value is None else value


def _blank_to_none(value: str | None) -> str | None:
    return value or None


RequiredText = Annotated[str, AfterValidator(_require_text)]
CategoryValue = Annotated[Category, BeforeValidator(_normalize_category)]
RelatedTerms = Annotated[list[str], BeforeValidator(_none_to_list)]
Sources = Annotated[str | None, AfterValidator(_blank_to_none)]


class Entry(CamelModel):
    """A stored knowledge-base entry."""

    id: str = Field(..., description="Unique entry identifier")
    title: str = Field(..., description="Display and sort title")
    category: Category = Field(..., description="Entry classification")
    description: str = Field(..., description="Free-text body")
    related_terms: list[str] | None = Field(
        default_factory=list, description="Ordered related terms"
    )
    sources: str | None = Field(default=None, description="Citations")
    created_at: datetime = Field(..., description="When the entry was created")
    updated_at: datetime = Field(..., description="When the entry last changed")
    created_by: str = Field(..., description="Actor that created the entry")


class EntryCreate(CamelModel):
    """Request model for creating an entry."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    title: RequiredText
    category: CategoryValue
    description: RequiredText
    related_terms: RelatedTerms = Field(default_factory=list)
    sources: Sources = None


class EntryUpdate(CamelModel):
    """Request model for updating an entry.

    Only fields present in the payload are applied; see ``model_fields_set``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    title: RequiredText | None = None
    category: CategoryValue | None = None
    description: RequiredText | None = None
    related_terms: Annotated[list[str] | None, BeforeValidator(_none_to_list)] = None
    sources: Sources = None

    @field_validator("title", "category", "description")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        # Validators only run for supplied fields, so None here was sent explicitly.
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict[str, object]:
        """Return only the fields the caller supplied."""
        return self.model_dump(include=self.model_fields_set)


class ListEntriesRequest(BaseModel):
    """Request model for listing entries with filtering and pagination."""

    search: str = ""
    category: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=12, ge=1)
    sort: EntrySort = EntrySort.ALPHABETICAL


class EntriesPage(CamelModel):
    """Page envelope returned by the list endpoint."""

    entries: list[Entry]
    total: int
    page: int
    total_pages: int


class MessageResponse(BaseModel):
    """Response carrying a human-readable message."""

    message: str


class FieldError(BaseModel):
    """One validation failure for one field."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Response body for rejected payloads."""

    message: str
    errors: list[FieldError]
