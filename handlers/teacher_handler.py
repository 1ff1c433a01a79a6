"""
handlers/teacher_handler.py
---------------------------
Routes for teacher records: list, add, delete.
"""

from typing import Optional

import psycopg2
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from handlers.context import ServerContext, get_context, parse_record_id
from models.schemas import TeacherIn
from models.teacher import Teacher
from utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["teacher"])


@router.get("/teacher")
def list_teachers(context: ServerContext = Depends(get_context)):
    try:
        teachers = context.teachers.get_all()
    except psycopg2.Error as e:
        logger.error(f"List teachers failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
    return [t.to_dict() for t in teachers]


@router.post("/addteacher")
def add_teacher(payload: Optional[TeacherIn] = None, context: ServerContext = Depends(get_context)):
    payload = payload or TeacherIn()
    teacher = Teacher(
        name=payload.name,
        subject=payload.subject,
        class_name=payload.class_name,
    )
    try:
        context.teachers.add(teacher)
    except psycopg2.Error as e:
        return JSONResponse(status_code=500, content={"error": str(e)})
    return {"message": "Teacher added"}


@router.delete("/teacher/{teacher_id}")
def delete_teacher(teacher_id: str, context: ServerContext = Depends(get_context)):
    record_id = parse_record_id(teacher_id)
    if record_id is None:
        return JSONResponse(status_code=404, content={"message": "Teacher not found"})

    try:
        deleted = context.teachers.delete(record_id)
    except psycopg2.Error as e:
        logger.error(f"Delete teacher error: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to delete teacher"})

    if not deleted:
        return JSONResponse(status_code=404, content={"message": "Teacher not found"})
    return {"message": "Teacher deleted successfully"}
