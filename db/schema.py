"""
db/schema.py
------------
Creates the target database if it does not exist yet.

PostgreSQL has no ``CREATE DATABASE IF NOT EXISTS``, so the catalog is
checked first. The bootstrap connection targets the maintenance database
and is always closed before returning.
"""

import psycopg2
from psycopg2 import sql

from config import DB_MAINTENANCE_DB
from db.errors import SchemaError
from models.db_config import DatabaseConfig
from utils.logger import get_logger

logger = get_logger(__name__)

_EXISTS_SQL = "SELECT 1 FROM pg_database WHERE datname = %s;"


def ensure_database(config: DatabaseConfig) -> None:
    """
    Create ``config.name`` on the server if it is absent. Safe to call
    multiple times.

    Args:
        config: Credentials; only host, port, user and password are used
            to connect.

    Raises:
        SchemaError: On any connection or statement failure.
    """
    conn = None
    try:
        conn = psycopg2.connect(**config.connect_kwargs(database=DB_MAINTENANCE_DB))
        # CREATE DATABASE cannot run inside a transaction block.
        conn.autocommit = True
        with conn.cursor() as cur:
            cur.execute(_EXISTS_SQL, (config.name,))
            if cur.fetchone() is None:
                cur.execute(
                    sql.SQL("CREATE DATABASE {}").format(sql.Identifier(config.name))
                )
                logger.info(f"Created database '{config.name}'")
        logger.info("✅ Database verified")
    except psycopg2.Error as e:
        raise SchemaError(f"Failed to ensure database '{config.name}': {e}") from e
    finally:
        if conn is not None:
            conn.close()
