"""
repositories/teacher_repo.py
-----------------------------
Data access layer for teacher records.
"""

from psycopg2 import extras

from db.connection import ConnectionPool
from models.teacher import Teacher
from utils.logger import get_logger

logger = get_logger(__name__)


class TeacherRepository:
    """Repository for CRUD operations on the teacher table."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    def add(self, teacher: Teacher) -> Teacher:
        """Insert a new teacher and populate its `id` and `created_at`."""
        sql = """
            INSERT INTO teacher (name, subject, class)
            VALUES (%s, %s, %s)
            RETURNING id, created_at;
        """
        with self.pool.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (teacher.name, teacher.subject, teacher.class_name))
                    row = cur.fetchone()
                    teacher.id = row[0]
                    teacher.created_at = row[1]
                conn.commit()
                logger.info(f"Added teacher #{teacher.id}")
                return teacher
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to add teacher: {e}")
                raise

    def get_all(self) -> list[Teacher]:
        sql = "SELECT * FROM teacher ORDER BY id;"
        with self.pool.connection() as conn:
            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(sql)
                    rows = cur.fetchall()
                conn.commit()
                return [Teacher.from_row(r) for r in rows]
            except Exception:
                conn.rollback()
                raise

    def delete(self, teacher_id: int) -> bool:
        """Delete a teacher by ID. Returns False if no row matched."""
        sql = "DELETE FROM teacher WHERE id = %s;"
        with self.pool.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (teacher_id,))
                    deleted = cur.rowcount > 0
                conn.commit()
                if deleted:
                    logger.info(f"Deleted teacher #{teacher_id}")
                return deleted
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to delete teacher #{teacher_id}: {e}")
                raise
