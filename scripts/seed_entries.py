"""Seed the configured storage with the sample entries.

Usage: python -m scripts.seed_entries
"""

import asyncio
import logging

from heathen_index.core.settings import get_settings
from heathen_index.features.entries.seed import seed_entries
from heathen_index.features.entries.storage import build_storage

logger = logging.getLogger(__name__)


async def main() -> int:
    """Connect to storage, seed it if empty, and disconnect."""
    settings = get_settings()
    if settings.storage_backend == "memory":
        logger.warning("Memory storage is selected; seeded data will not persist.")

    storage = build_storage(settings)
    await storage.connect()
    try:
        return await seed_entries(storage)
    finally:
        await storage.disconnect()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    created = asyncio.run(main())
    print(f"Created {created} entries.")
