"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.

Database credentials are NOT configured here: they are fetched from the
SSM Parameter Store at startup (see db/parameter_store.py).
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── AWS Parameter Store ───────────────────────────────────
AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")
SSM_PARAMETER_PREFIX: str = os.getenv("SSM_PARAMETER_PREFIX", "/myapp/db").rstrip("/")
SSM_TIMEOUT_SECONDS: int = int(os.getenv("SSM_TIMEOUT_SECONDS", "10"))

# ── PostgreSQL ────────────────────────────────────────────
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_MAINTENANCE_DB: str = os.getenv("DB_MAINTENANCE_DB", "postgres")
# "require" encrypts the connection without verifying the server certificate.
DB_SSL_MODE: str = os.getenv("DB_SSL_MODE", "require")
DB_CONNECT_TIMEOUT: int = int(os.getenv("DB_CONNECT_TIMEOUT", "10"))

# ── Connection Pool ───────────────────────────────────────
DB_POOL_MIN_CONN: int = int(os.getenv("DB_POOL_MIN_CONN", "1"))
DB_POOL_MAX_CONN: int = int(os.getenv("DB_POOL_MAX_CONN", "10"))

# ── Startup Retry ─────────────────────────────────────────
DB_CONNECT_RETRIES: int = int(os.getenv("DB_CONNECT_RETRIES", "10"))
DB_CONNECT_DELAY_SECONDS: float = float(os.getenv("DB_CONNECT_DELAY_SECONDS", "3"))

# ── HTTP Server ───────────────────────────────────────────
SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT: int = int(os.getenv("SERVER_PORT", "3500"))

_raw_origins = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS: list[str] = [o.strip() for o in _raw_origins.split(",") if o.strip()]

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
