import pytest

from fittrack.db import create_tables, make_engine, make_session_factory
from fittrack.schemas.user import UserCreate
from fittrack.storage.database import DatabaseStorage
from fittrack.storage.memory import MemStorage


def make_sqlite_storage() -> DatabaseStorage:
    engine = make_engine("sqlite+pysqlite:///:memory:")
    create_tables(engine)
    return DatabaseStorage(make_session_factory(engine))


@pytest.fixture(params=["memory", "database"])
def storage(request):
    if request.param == "memory":
        return MemStorage()
    return make_sqlite_storage()


@pytest.fixture
def user(storage):
    return storage.create_user(UserCreate(username="sam", password="secret"))


@pytest.fixture
def both_storages():
    """A volatile and a durable store, both empty."""
    return MemStorage(), make_sqlite_storage()
