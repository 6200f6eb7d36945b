"""Validation of entry write payloads.

The request models in ``dtos`` describe the shape; these functions run them
against raw payloads and report problems as ``{field, message}`` pairs so
callers never see pydantic's internal error format.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from heathen_index.core.exceptions import format_field_errors
from heathen_index.features.entries.dtos import EntryCreate, EntryUpdate

ModelT = TypeVar("ModelT", bound=BaseModel)


class EntryValidationError(ValueError):
    """Raised when a payload does not describe a valid entry."""

    def __init__(self, errors: list[dict[str, str]]):
        super().__init__("Invalid entry data")
        self.errors = errors


def _parse(model: type[ModelT], payload: Any) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise EntryValidationError(format_field_errors(e.errors())) from e


def collect_entry_errors(payload: Any, partial: bool = False) -> list[dict[str, str]]:
    """Return every field error in ``payload``; empty when it is valid."""
    try:
        if partial:
            validate_entry_update(payload)
        else:
            validate_entry_create(payload)
    except EntryValidationError as e:
        return e.errors
    return []


def validate_entry_create(payload: Any) -> EntryCreate:
    """Validate a full entry payload.

    Raises:
        EntryValidationError: With one item per offending field
    """
    return _parse(EntryCreate, payload)


def validate_entry_update(payload: Any) -> EntryUpdate:
    """Validate a partial entry payload; absent fields are left alone.

    Raises:
        EntryValidationError: With one item per offending field
    """
    return _parse(EntryUpdate, payload)
