"""
handlers/context.py
-------------------
Process-wide server state, built once after startup succeeds and
injected into every route through a FastAPI dependency.
"""

from dataclasses import dataclass

from fastapi import HTTPException, Request

from db.connection import ConnectionPool
from repositories.student_repo import StudentRepository
from repositories.teacher_repo import TeacherRepository


@dataclass(frozen=True)
class ServerContext:
    """Owns the single connection pool and the repositories that use it."""
    pool: ConnectionPool
    students: StudentRepository
    teachers: TeacherRepository

    @classmethod
    def from_pool(cls, pool: ConnectionPool) -> "ServerContext":
        return cls(
            pool=pool,
            students=StudentRepository(pool),
            teachers=TeacherRepository(pool),
        )


def get_context(request: Request) -> ServerContext:
    """FastAPI dependency returning the ServerContext attached to the app."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise HTTPException(status_code=503, detail="Database not initialized")
    return context


# SERIAL columns are 4-byte integers.
_MAX_ID = 2**31 - 1


def parse_record_id(raw: str) -> int | None:
    """
    Parse a path id. Returns None when it cannot match any row
    (not an integer, or outside the SERIAL range).
    """
    try:
        record_id = int(raw)
    except ValueError:
        return None
    if not 0 < record_id <= _MAX_ID:
        return None
    return record_id
