"""
models/db_config.py
-------------------
Connection settings for the PostgreSQL server, as read from the Parameter Store.
"""

from dataclasses import dataclass, fields

from config import DB_CONNECT_TIMEOUT, DB_PORT, DB_SSL_MODE

REQUIRED_FIELDS = ("host", "user", "password", "name")


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Credentials for one startup attempt. Immutable; a new instance is built
    for every attempt so stale values are never reused.

    Attributes:
        host: Database server hostname.
        user: Login role.
        password: Login password.
        name: Target database name.
        port: Server port (not stored in the Parameter Store).
    """
    host: str
    user: str
    password: str
    name: str
    port: int = DB_PORT

    @classmethod
    def from_mapping(cls, values: dict) -> "DatabaseConfig":
        """Build a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})

    def missing_fields(self) -> list[str]:
        """Return the required fields that are absent or empty."""
        return [f for f in REQUIRED_FIELDS if not getattr(self, f)]

    def connect_kwargs(self, database: str | None = None) -> dict:
        """
        Keyword arguments for ``psycopg2.connect``.

        Args:
            database: Database to select. Defaults to ``self.name``.
        """
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "dbname": database or self.name,
            "connect_timeout": DB_CONNECT_TIMEOUT,
            "sslmode": DB_SSL_MODE,
        }

    def __repr__(self) -> str:
        return (
            f"DatabaseConfig(host={self.host!r}, user={self.user!r}, "
            f"password='***', name={self.name!r}, port={self.port})"
        )
