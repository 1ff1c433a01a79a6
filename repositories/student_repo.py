"""
repositories/student_repo.py
-----------------------------
Data access layer for student records.
All SQL queries related to the `student` table live here.
"""

from psycopg2 import extras

from db.connection import ConnectionPool
from models.student import Student
from utils.logger import get_logger

logger = get_logger(__name__)


class StudentRepository:
    """Repository for CRUD operations on the student table."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    # ── CREATE ────────────────────────────────────────────

    def add(self, student: Student) -> Student:
        """
        Insert a new student record.

        Args:
            student: The Student domain object to persist.

        Returns:
            The same Student with its `id` and `created_at` populated.
        """
        sql = """
            INSERT INTO student (name, roll_number, class)
            VALUES (%s, %s, %s)
            RETURNING id, created_at;
        """
        with self.pool.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (student.name, student.roll_number, student.class_name))
                    row = cur.fetchone()
                    student.id = row[0]
                    student.created_at = row[1]
                conn.commit()
                logger.info(f"Added student #{student.id}")
                return student
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to add student: {e}")
                raise

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Student]:
        """Fetch every student, oldest first."""
        sql = "SELECT * FROM student ORDER BY id;"
        with self.pool.connection() as conn:
            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(sql)
                    rows = cur.fetchall()
                conn.commit()
                return [Student.from_row(r) for r in rows]
            except Exception:
                conn.rollback()
                raise

    # ── DELETE ────────────────────────────────────────────

    def delete(self, student_id: int) -> bool:
        """
        Delete a student by ID.

        Returns:
            True if a row was removed, False if no row matched.
        """
        sql = "DELETE FROM student WHERE id = %s;"
        with self.pool.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (student_id,))
                    deleted = cur.rowcount > 0
                conn.commit()
                if deleted:
                    logger.info(f"Deleted student #{student_id}")
                return deleted
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to delete student #{student_id}: {e}")
                raise
