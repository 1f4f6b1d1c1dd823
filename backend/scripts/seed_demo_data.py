"""Seed the configured store with the demo user and sample data.

Usage (from backend/):
    STORAGE_BACKEND=database DATABASE_URL=... python -m scripts.seed_demo_data
"""
import logging

from fittrack.core.config import settings
from fittrack.core.log_config import configure_logging
from fittrack.seed import seed_database
from fittrack.storage.factory import build_storage

logger = logging.getLogger("fittrack.scripts.seed")


def main():
    configure_logging(settings.log_level)
    if settings.storage_backend == "memory":
        logger.warning("STORAGE_BACKEND is 'memory'; seeded data will not persist")
    storage = build_storage(settings)
    if seed_database(storage):
        logger.info("Seed complete")
    else:
        logger.info("Nothing to do")


if __name__ == "__main__":
    main()
