"""
models/teacher.py
-----------------
Domain model for teacher records.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Teacher:
    """
    Represents a single row of the `teacher` table.

    Attributes:
        id: Database primary key (None for new records).
        name: Teacher's name.
        subject: Subject taught.
        class_name: Class the teacher is assigned to (column `class`).
        created_at: Timestamp when the record was created.
    """
    name: Optional[str] = None
    subject: Optional[str] = None
    class_name: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict) -> "Teacher":
        return cls(
            id=row["id"],
            name=row["name"],
            subject=row["subject"],
            class_name=row["class"],
            created_at=row["created_at"],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "subject": self.subject,
            "class": self.class_name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
