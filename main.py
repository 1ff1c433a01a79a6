"""
main.py
-------
Entry point for the school records backend.

Responsibilities:
    - Fetch DB credentials and bring the database online (with retries).
    - Create the tables.
    - Serve the HTTP API with uvicorn once, and only once, the pool exists.
"""

import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, SERVER_HOST, SERVER_PORT
from db.errors import SchemaError, StartupError
from db.init_db import ensure_tables
from db.startup import connect_with_retry
from handlers import health_handler, student_handler, teacher_handler
from handlers.context import ServerContext
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(context: ServerContext | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        context: Server state holding the connection pool. Routes that need
            the database answer 503 until one is attached.
    """
    app = FastAPI(title="School Records Backend")
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_handler.router)
    app.include_router(student_handler.router)
    app.include_router(teacher_handler.router)
    return app


def bootstrap(**startup_kwargs) -> ServerContext:
    """
    Run the startup sequence and return the ready server state.

    Args:
        **startup_kwargs: Forwarded to ``connect_with_retry``.

    Raises:
        StartupError: Every connection attempt failed.
        SchemaError: Table creation failed.
    """
    pool = connect_with_retry(**startup_kwargs)
    try:
        ensure_tables(pool)
    except SchemaError:
        pool.close()
        raise
    return ServerContext.from_pool(pool)


def main() -> None:
    """Bring the database online and run the HTTP server."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    try:
        context = bootstrap()
    except (StartupError, SchemaError) as e:
        logger.critical(f"❌ App failed to start: {e}")
        sys.exit(1)

    # ── 2. Serve ──────────────────────────────────────────
    app = create_app(context)
    logger.info(f"🚀 Server running on port {SERVER_PORT}")
    try:
        uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT, log_config=None)
    finally:
        # ── 3. Cleanup on shutdown ────────────────────────
        context.pool.close()
        logger.info("Server stopped.")


if __name__ == "__main__":
    main()
