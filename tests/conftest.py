from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from handlers.context import ServerContext
from main import create_app


class FakePool:
    """Stands in for ConnectionPool in route tests."""

    def __init__(self, ping_error: Exception | None = None):
        self.database = "school"
        self.ping_error = ping_error
        self.closed = False

    def ping(self) -> dict:
        if self.ping_error:
            raise self.ping_error
        return {"db_up": 1}

    def close(self) -> None:
        self.closed = True


class InMemoryRepository:
    """Keeps rows in a dict and assigns identities like SERIAL does."""

    def __init__(self):
        self.rows = {}
        self._next_id = 1
        self.error: Exception | None = None

    def _check(self):
        if self.error:
            raise self.error

    def add(self, record):
        self._check()
        record.id = self._next_id
        record.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.rows[record.id] = record
        self._next_id += 1
        return record

    def get_all(self):
        self._check()
        return list(self.rows.values())

    def delete(self, record_id: int) -> bool:
        self._check()
        return self.rows.pop(record_id, None) is not None


@pytest.fixture
def context():
    return ServerContext(
        pool=FakePool(),
        students=InMemoryRepository(),
        teachers=InMemoryRepository(),
    )


@pytest.fixture
def client(context):
    return TestClient(create_app(context))
