"""
models/schemas.py
-----------------
Pydantic request bodies for the write endpoints.
Fields are optional and untyped on input: any JSON value is accepted and
stored as text, so payloads are inserted as received, without validation.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Optional[str]:
    """None stays NULL; anything else (numbers, booleans...) is stored as text."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


class StudentIn(BaseModel):
    """Body of POST /addstudent."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    roll_no: Optional[str] = Field(default=None, alias="rollNo")
    class_name: Optional[str] = Field(default=None, alias="class")

    @field_validator("name", "roll_no", "class_name", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Optional[str]:
        return _as_text(v)


class TeacherIn(BaseModel):
    """Body of POST /addteacher."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    subject: Optional[str] = None
    class_name: Optional[str] = Field(default=None, alias="class")

    @field_validator("name", "subject", "class_name", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Optional[str]:
        return _as_text(v)
