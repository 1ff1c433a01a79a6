import threading
from unittest.mock import MagicMock

import psycopg2
import pytest

import db.connection
from db.connection import ConnectionPool, build_pool
from db.errors import PoolError
from models.db_config import DatabaseConfig

CONFIG = DatabaseConfig(host="h", user="u", password="p", name="school")


def test_build_pool_uses_fixed_policy(monkeypatch):
    raw_pool_cls = MagicMock()
    monkeypatch.setattr(db.connection.pool, "ThreadedConnectionPool", raw_pool_cls)

    pool = build_pool(CONFIG)

    args, kwargs = raw_pool_cls.call_args
    assert args == (1, 10)
    assert kwargs["dbname"] == "school"
    assert kwargs["sslmode"] == "require"
    assert pool.max_conn == 10
    assert pool.database == "school"


def test_build_pool_driver_rejection_raises_pool_error(monkeypatch):
    monkeypatch.setattr(
        db.connection.pool,
        "ThreadedConnectionPool",
        MagicMock(side_effect=psycopg2.OperationalError('database "school" does not exist')),
    )

    with pytest.raises(PoolError, match="does not exist"):
        build_pool(CONFIG)


def test_connection_is_released_after_with_block():
    raw_pool = MagicMock()
    pool = ConnectionPool(raw_pool, max_conn=2, database="school")

    with pool.connection() as conn:
        assert conn is raw_pool.getconn.return_value

    raw_pool.putconn.assert_called_once_with(conn)


def test_connection_is_released_when_block_raises():
    raw_pool = MagicMock()
    pool = ConnectionPool(raw_pool, max_conn=1, database="school")

    with pytest.raises(RuntimeError):
        with pool.connection():
            raise RuntimeError("query failed")

    # The single slot is free again.
    with pool.connection():
        pass
    assert raw_pool.putconn.call_count == 2


def test_callers_beyond_cap_wait_for_a_free_slot():
    raw_pool = MagicMock()
    pool = ConnectionPool(raw_pool, max_conn=1, database="school")
    first = pool.get_connection()
    acquired = threading.Event()

    def borrow():
        conn = pool.get_connection()
        acquired.set()
        pool.release_connection(conn)

    worker = threading.Thread(target=borrow)
    worker.start()
    assert not acquired.wait(timeout=0.1)

    pool.release_connection(first)
    assert acquired.wait(timeout=2)
    worker.join(timeout=2)


def test_ping_returns_row():
    raw_pool = MagicMock()
    cur = raw_pool.getconn.return_value.cursor.return_value.__enter__.return_value
    cur.fetchone.return_value = {"db_up": 1}
    pool = ConnectionPool(raw_pool, max_conn=10, database="school")

    assert pool.ping() == {"db_up": 1}
    raw_pool.putconn.assert_called_once()


def test_close_is_idempotent():
    raw_pool = MagicMock()
    raw_pool.closed = False
    pool = ConnectionPool(raw_pool, max_conn=10, database="school")

    pool.close()
    raw_pool.closed = True
    pool.close()

    raw_pool.closeall.assert_called_once()
