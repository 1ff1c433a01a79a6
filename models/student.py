"""
models/student.py
-----------------
Domain model for student records.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Student:
    """
    Represents a single row of the `student` table.

    Attributes:
        id: Database primary key (None for new records).
        name: Student's name.
        roll_number: School roll number.
        class_name: Class the student belongs to (column `class`).
        created_at: Timestamp when the record was created.
    """
    name: Optional[str] = None
    roll_number: Optional[str] = None
    class_name: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict) -> "Student":
        return cls(
            id=row["id"],
            name=row["name"],
            roll_number=row["roll_number"],
            class_name=row["class"],
            created_at=row["created_at"],
        )

    def to_dict(self) -> dict:
        """Serialize using the table's column names."""
        return {
            "id": self.id,
            "name": self.name,
            "roll_number": self.roll_number,
            "class": self.class_name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
