"""
db/startup.py
-------------
Startup sequence: fetch parameters, ensure the database exists and build
the connection pool, retried as one unit with a fixed delay.

State machine:
    ATTEMPTING(i) --success--> SUCCEEDED
    ATTEMPTING(i) --failure, i < N--> sleep(delay) -> ATTEMPTING(i + 1)
    ATTEMPTING(N) --failure--> FAILED_FATAL (raises StartupError)

Every attempt starts from scratch, including a fresh parameter fetch.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from config import DB_CONNECT_DELAY_SECONDS, DB_CONNECT_RETRIES
from db.connection import ConnectionPool, build_pool
from db.errors import BootstrapError, StartupError
from db.parameter_store import ParameterFetcher
from db.schema import ensure_database
from models.db_config import DatabaseConfig
from utils.logger import get_logger

logger = get_logger(__name__)


class StartupState(Enum):
    ATTEMPTING = "attempting"
    SUCCEEDED = "succeeded"
    FAILED_FATAL = "failed_fatal"


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry with a fixed delay; no backoff, no jitter."""
    retries: int = DB_CONNECT_RETRIES
    delay_seconds: float = DB_CONNECT_DELAY_SECONDS

    def __post_init__(self):
        if self.retries < 1:
            raise ValueError("retries must be at least 1")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")


def next_state(attempt: int, retries: int, succeeded: bool) -> StartupState:
    """
    Transition out of ATTEMPTING(attempt).

    Args:
        attempt: 1-based number of the attempt that just finished.
        retries: Maximum number of attempts.
        succeeded: Whether every step of the attempt completed.
    """
    if succeeded:
        return StartupState.SUCCEEDED
    if attempt >= retries:
        return StartupState.FAILED_FATAL
    return StartupState.ATTEMPTING


def run_attempt(
    fetch: Callable[[], DatabaseConfig],
    ensure_db: Callable[[DatabaseConfig], None],
    make_pool: Callable[[DatabaseConfig], ConnectionPool],
) -> ConnectionPool:
    """Run fetch -> ensure_db -> make_pool; the first failure aborts the rest."""
    config = fetch()
    ensure_db(config)
    return make_pool(config)


def connect_with_retry(
    fetcher: ParameterFetcher | None = None,
    policy: RetryPolicy | None = None,
    *,
    ensure_db: Callable[[DatabaseConfig], None] = ensure_database,
    make_pool: Callable[[DatabaseConfig], ConnectionPool] = build_pool,
    sleep: Callable[[float], None] = time.sleep,
) -> ConnectionPool:
    """
    Bring the database online, retrying transient failures.

    Args:
        fetcher: Parameter source. Defaults to the SSM-backed ParameterFetcher.
        policy: Retry bound and delay. Defaults to DB_CONNECT_RETRIES /
            DB_CONNECT_DELAY_SECONDS.
        ensure_db: Schema initializer step.
        make_pool: Pool builder step.
        sleep: Blocking sleep used between attempts.

    Returns:
        A ready ConnectionPool.

    Raises:
        StartupError: When the final attempt fails. The last error is chained.
    """
    fetcher = fetcher or ParameterFetcher()
    policy = policy or RetryPolicy()

    state = StartupState.ATTEMPTING
    attempt = 0
    last_error: BootstrapError | None = None
    pool = None

    while state is StartupState.ATTEMPTING:
        attempt += 1
        try:
            pool = run_attempt(fetcher.fetch, ensure_db, make_pool)
        except BootstrapError as e:
            last_error = e
            state = next_state(attempt, policy.retries, succeeded=False)
            logger.error(f"❌ DB connection failed (attempt {attempt}/{policy.retries}): {e}")
            if state is StartupState.ATTEMPTING:
                sleep(policy.delay_seconds)
            continue
        state = next_state(attempt, policy.retries, succeeded=True)

    if state is StartupState.FAILED_FATAL:
        logger.critical(f"Giving up on the database after {attempt} attempt(s)")
        raise StartupError(attempt, last_error) from last_error

    logger.info(f"✅ Connected to database (attempt {attempt})")
    return pool
