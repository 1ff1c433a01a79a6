"""
handlers/health_handler.py
--------------------------
Liveness (/health) and database (/health/db) checks.
"""

import time

import psycopg2
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from handlers.context import ServerContext, get_context
from utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("")
def health() -> dict:
    """Basic health for the load balancer. Never touches the database."""
    return {
        "status": "ok",
        "service": "backend",
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
    }


@router.get("/db")
def health_db(context: ServerContext = Depends(get_context)):
    """Run a trivial query through the pool."""
    try:
        row = context.pool.ping()
    except psycopg2.Error as e:
        logger.error(f"DB health check failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": "down", "error": str(e)},
        )
    return {
        "status": "ok",
        "database": "connected",
        "database_name": context.pool.database,
        "result": row,
    }
