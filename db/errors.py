"""
db/errors.py
------------
Exceptions raised while bringing the database online.
"""


class BootstrapError(Exception):
    """Base class for failures of a single startup step."""


class ConfigError(BootstrapError):
    """Parameter Store unreachable, or a required parameter is missing/empty."""


class SchemaError(BootstrapError):
    """A CREATE DATABASE / CREATE TABLE statement (or its connection) failed."""


class PoolError(BootstrapError):
    """The driver rejected the connection pool configuration."""


class StartupError(Exception):
    """
    Raised once every startup attempt has failed.

    Attributes:
        attempts: Number of attempts made.
        last_error: The error that ended the final attempt.
    """

    def __init__(self, attempts: int, last_error: Exception):
        super().__init__(
            f"Database startup failed after {attempts} attempt(s): {last_error}"
        )
        self.attempts = attempts
        self.last_error = last_error
