"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool, shared by all request handlers.

Requests beyond the pool's connection cap wait on a semaphore instead of
failing with "connection pool exhausted".
"""

import threading
from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import extras, pool

from config import DB_POOL_MAX_CONN, DB_POOL_MIN_CONN
from db.errors import PoolError
from models.db_config import DatabaseConfig
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionPool:
    """A bounded set of live connections to one database."""

    def __init__(self, raw_pool: pool.AbstractConnectionPool, max_conn: int, database: str):
        self._pool = raw_pool
        self._slots = threading.BoundedSemaphore(max_conn)
        self.max_conn = max_conn
        self.database = database

    @property
    def closed(self) -> bool:
        return bool(self._pool.closed)

    def get_connection(self):
        """
        Get a connection from the pool, blocking while all are in use.

        Returns:
            A psycopg2 connection object.
        """
        self._slots.acquire()
        try:
            return self._pool.getconn()
        except Exception:
            self._slots.release()
            raise

    def release_connection(self, conn) -> None:
        """
        Return a connection back to the pool.

        Args:
            conn: The psycopg2 connection to release.
        """
        try:
            self._pool.putconn(conn)
        finally:
            self._slots.release()

    @contextmanager
    def connection(self) -> Iterator:
        """Borrow a connection for the duration of a ``with`` block."""
        conn = self.get_connection()
        try:
            yield conn
        finally:
            self.release_connection(conn)

    def ping(self) -> dict:
        """Run ``SELECT 1`` on a pooled connection and return the row."""
        with self.connection() as conn:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute("SELECT 1 AS db_up;")
                return dict(cur.fetchone())

    def close(self) -> None:
        """Close all connections in the pool."""
        if not self.closed:
            self._pool.closeall()
            logger.info("Database connection pool closed.")


def build_pool(
    config: DatabaseConfig,
    min_conn: int = DB_POOL_MIN_CONN,
    max_conn: int = DB_POOL_MAX_CONN,
) -> ConnectionPool:
    """
    Initialize the database connection pool.

    Args:
        config: Full credentials, including the database name.
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of simultaneous connections.

    Raises:
        PoolError: If the driver rejects the configuration or the
            database is unreachable.
    """
    try:
        raw_pool = pool.ThreadedConnectionPool(
            min_conn, max_conn, **config.connect_kwargs()
        )
    except psycopg2.Error as e:
        raise PoolError(f"Failed to initialize database pool: {e}") from e

    logger.info(
        f"Database connection pool initialized "
        f"(db={config.name}, max_conn={max_conn}, sslmode={config.connect_kwargs()['sslmode']})"
    )
    return ConnectionPool(raw_pool, max_conn, config.name)
