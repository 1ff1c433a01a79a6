"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Runs once at startup, after the connection pool is ready.
"""

import psycopg2
from psycopg2 import errors

from db.connection import ConnectionPool
from db.errors import SchemaError
from utils.logger import get_logger

logger = get_logger(__name__)

_CREATE_ATTEMPTS = 2

STUDENT_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS student (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(255),
    roll_number     VARCHAR(255),
    class           VARCHAR(255),
    created_at      TIMESTAMPTZ DEFAULT NOW()
);
"""

TEACHER_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS teacher (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(255),
    subject         VARCHAR(255),
    class           VARCHAR(255),
    created_at      TIMESTAMPTZ DEFAULT NOW()
);
"""


def ensure_tables(pool: ConnectionPool) -> None:
    """
    Create the `student` and `teacher` tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Two processes creating the same table at once can race on the catalog
    and get a UniqueViolation even with IF NOT EXISTS; the losing side
    rolls back and runs the statements once more, which then find the
    tables in place.

    Raises:
        SchemaError: If either statement fails.
    """
    with pool.connection() as conn:
        for attempt in range(1, _CREATE_ATTEMPTS + 1):
            try:
                with conn.cursor() as cur:
                    cur.execute(STUDENT_TABLE_SQL)
                    cur.execute(TEACHER_TABLE_SQL)
                conn.commit()
                logger.info("✅ Tables ready")
                return
            except errors.UniqueViolation as e:
                conn.rollback()
                if attempt == _CREATE_ATTEMPTS:
                    logger.error(f"Failed to initialize schema: {e}")
                    raise SchemaError(f"Failed to create tables: {e}") from e
                logger.warning("Concurrent table creation detected, retrying")
            except psycopg2.Error as e:
                conn.rollback()
                logger.error(f"Failed to initialize schema: {e}")
                raise SchemaError(f"Failed to create tables: {e}") from e
