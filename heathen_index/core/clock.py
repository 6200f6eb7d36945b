"""Timestamp helpers shared by the storage implementations."""

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (e.g. read back from SQLite)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def touched_at(previous: datetime) -> datetime:
    """Timestamp for a mutation, never earlier than ``previous``."""
    return max(now_utc(), ensure_utc(previous))
