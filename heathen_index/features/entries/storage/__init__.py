"""Storage implementations for entries and users."""

from heathen_index.core.settings import Settings
from heathen_index.features.entries.storage.database import DatabaseStorage
from heathen_index.features.entries.storage.memory import MemoryStorage
from heathen_index.features.entries.storage.protocols import Storage


def build_storage(settings: Settings) -> Storage:
    """Construct the storage implementation selected by ``settings``."""
    if settings.storage_backend == "database":
        return DatabaseStorage.from_url(settings.sqlalchemy_url, echo=settings.debug)
    return MemoryStorage()


__all__ = [
    "DatabaseStorage",
    "MemoryStorage",
    "Storage",
    "build_storage",
]
