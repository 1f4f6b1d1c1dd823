import logging

from sqlalchemy.exc import SQLAlchemyError

from fittrack.core.config import Settings
from fittrack.db import create_tables, make_engine, make_session_factory
from fittrack.storage.base import Storage
from fittrack.storage.database import DatabaseStorage
from fittrack.storage.errors import StoreUnavailable
from fittrack.storage.memory import MemStorage

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> Storage:
    """Construct the storage backend named by `settings.storage_backend`.

    Called once at startup; the result is passed to whoever needs it.
    """
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage (data is lost on restart)")
        return MemStorage()

    engine = make_engine(settings.database_url)
    # Create DB tables on startup (no migrations)
    try:
        create_tables(engine)
    except SQLAlchemyError as exc:
        raise StoreUnavailable(f"cannot initialize database: {exc}") from exc
    logger.info(
        "Using database storage at %s", engine.url.render_as_string(hide_password=True)
    )
    return DatabaseStorage(make_session_factory(engine))
