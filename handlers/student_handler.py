"""
handlers/student_handler.py
---------------------------
Routes for student records: list, add, delete.
Also serves GET /, which lists students under a status message.
"""

from typing import Optional

import psycopg2
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from handlers.context import ServerContext, get_context, parse_record_id
from models.schemas import StudentIn
from models.student import Student
from utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["student"])


def _query_failed(e: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/")
def root(context: ServerContext = Depends(get_context)):
    try:
        students = context.students.get_all()
    except psycopg2.Error as e:
        logger.error(f"List students failed: {e}")
        return _query_failed(e)
    return {"message": "Backend running 🚀", "data": [s.to_dict() for s in students]}


@router.get("/student")
def list_students(context: ServerContext = Depends(get_context)):
    try:
        students = context.students.get_all()
    except psycopg2.Error as e:
        logger.error(f"List students failed: {e}")
        return _query_failed(e)
    return [s.to_dict() for s in students]


@router.post("/addstudent")
def add_student(payload: Optional[StudentIn] = None, context: ServerContext = Depends(get_context)):
    """Insert the payload as-is; fields are not validated and the body may be absent."""
    payload = payload or StudentIn()
    student = Student(
        name=payload.name,
        roll_number=payload.roll_no,
        class_name=payload.class_name,
    )
    try:
        context.students.add(student)
    except psycopg2.Error as e:
        return _query_failed(e)
    return {"message": "Student added"}


@router.delete("/student/{student_id}")
def delete_student(student_id: str, context: ServerContext = Depends(get_context)):
    record_id = parse_record_id(student_id)
    if record_id is None:
        return JSONResponse(status_code=404, content={"message": "Student not found"})

    try:
        deleted = context.students.delete(record_id)
    except psycopg2.Error as e:
        logger.error(f"Delete student error: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to delete student"})

    if not deleted:
        return JSONResponse(status_code=404, content={"message": "Student not found"})
    return {"message": "Student deleted successfully"}
