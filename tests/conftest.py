import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from message_board.app import app
from message_board.utils.db import query
from message_board.utils.schema import init_schema
from message_board.utils.store import MessageStore, get_store


class BrokenStore(MessageStore):
    """Store whose every statement fails like an unreachable database."""

    def list_recent(self, limit=20):
        raise RuntimeError("database is unavailable")

    def insert(self, name, email, message, created_at=None):
        raise RuntimeError("database is unavailable")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return MessageStore(engine)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_store] = lambda: BrokenStore()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def row_count(engine):
    def count():
        return query("SELECT COUNT(*) AS c FROM messages", engine=engine).scalar()
    return count
